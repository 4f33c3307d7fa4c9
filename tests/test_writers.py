"""Tests for log writers"""

import io
import os
import pytest
import tempfile
from pathlib import Path

from simple_logger.writers import ConsoleWriter, FileWriter


class TestConsoleWriter:
    """Test console writer."""

    def test_write_to_stream(self):
        stream = io.StringIO()
        writer = ConsoleWriter(stream=stream)
        writer.write("line")
        assert stream.getvalue() == "line" + os.linesep

    def test_defaults_to_stdout(self, capsys):
        writer = ConsoleWriter()
        writer.write("to stdout")
        assert capsys.readouterr().out == "to stdout" + os.linesep

    def test_close_does_not_close_stream(self):
        stream = io.StringIO()
        writer = ConsoleWriter(stream=stream)
        writer.close()
        assert not stream.closed


class TestFileWriter:
    """Test file writer."""

    def test_append_mode(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.log"
            path.write_text("existing" + os.linesep)
            with FileWriter(path, mode="a") as writer:
                writer.write("new")
            assert path.read_text() == "existing" + os.linesep + "new" + os.linesep

    def test_truncate_mode(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "app.log"
            path.write_text("existing" + os.linesep)
            with FileWriter(path, mode="w") as writer:
                writer.write_lines(["one", "two"])
            assert path.read_text().splitlines() == ["one", "two"]

    def test_autoflush(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "app.log")
            writer = FileWriter(path, autoflush=True)
            writer.write("visible")
            assert Path(path).read_text() == "visible" + os.linesep
            writer.close()

    def test_close(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            writer = FileWriter(os.path.join(tmpdir, "app.log"))
            assert writer.closed is False
            writer.close()
            assert writer.closed is True
            writer.write("ignored after close")

    def test_missing_directory_not_created(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "missing" / "app.log"
            with pytest.raises(OSError):
                FileWriter(path)
            assert not path.parent.exists()

    def test_invalid_mode(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ValueError):
                FileWriter(os.path.join(tmpdir, "app.log"), mode="r")
