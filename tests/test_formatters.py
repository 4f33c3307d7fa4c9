"""Tests for log formatters"""

import re
import pytest

from simple_logger.core.log_entry import LogEntry
from simple_logger.formatters import BaseFormatter, TextFormatter
from simple_logger.formatters.text_formatter import stringify

ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2} ")


class TestStringify:
    """Test message stringification."""

    def test_string_unchanged(self):
        assert stringify("plain text") == "plain text"

    def test_number(self):
        assert stringify(42) == "42"
        assert stringify(1.5) == "1.5"

    def test_dict_sorted(self):
        assert stringify({"b": 1, "a": 2}) == "{'a': 2, 'b': 1}"

    def test_list(self):
        assert stringify([1, "two"]) == "[1, 'two']"

    def test_large_structure_pretty_printed(self):
        value = {f"key{i}": list(range(10)) for i in range(5)}
        assert "\n" in stringify(value)

    def test_custom_object(self):
        class Point:
            def __str__(self):
                return "(1, 2)"

        assert stringify(Point()) == "(1, 2)"


class TestTextFormatter:
    """Test the one-line text formatter."""

    def setup_method(self):
        self.formatter = TextFormatter()

    def test_format_without_name(self):
        entry = LogEntry(timestamp=1523279823, level="info", message="simple log line")
        line = self.formatter.format(entry)
        assert ISO_PREFIX.match(line)
        assert line.endswith(" [INFO] : simple log line")

    def test_format_with_name(self):
        entry = LogEntry(timestamp=1523279823, level="warning", message="content", name="title")
        line = self.formatter.format(entry)
        assert line.endswith(" [WARNING] : title => content")

    def test_empty_entry(self):
        assert self.formatter.format(None) == ""

    def test_timestamp(self):
        # isoformat with seconds precision, local offset
        stamp = TextFormatter.format_timestamp(0)
        assert ISO_PREFIX.match(stamp + " ")

    def test_structured_message(self):
        entry = LogEntry(timestamp=0, level="debug", message={"x": False})
        assert self.formatter.format(entry).endswith("[DEBUG] : {'x': False}")

    def test_custom_separator(self):
        formatter = TextFormatter(separator=": ")
        entry = LogEntry(timestamp=0, level="error", message="boom", name="db")
        assert formatter.format(entry).endswith("[ERROR] : db: boom")

    def test_callable(self):
        entry = LogEntry(timestamp=0, level="info", message="m")
        assert self.formatter(entry) == self.formatter.format(entry)

    def test_single_line_for_simple_messages(self):
        entry = LogEntry(timestamp=0, level="info", message="m", name="n")
        assert "\n" not in self.formatter.format(entry)

    def test_base_formatter_is_abstract(self):
        with pytest.raises(TypeError):
            BaseFormatter()

    def test_repr(self):
        assert "TextFormatter" in repr(self.formatter)
