"""File writer"""

import os
from pathlib import Path
from typing import Iterable, Union


class FileWriter:
    """Write formatted log lines to a file."""

    def __init__(
        self,
        filepath: Union[str, Path],
        mode: str = "a",
        encoding: str = "utf-8",
        autoflush: bool = False,
    ):
        """
        Initialize file writer.

        The parent directory must already exist; it is never created.

        Args:
            filepath: Path to log file
            mode: File open mode ('a' to append, 'w' to overwrite)
            encoding: File encoding (default: 'utf-8')
            autoflush: Flush after every line
        """
        if mode not in ("a", "w"):
            raise ValueError(f"Unsupported file mode: {mode}")
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.autoflush = autoflush
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        # newline="" keeps os.linesep as the only line terminator
        self._file = open(self.filepath, self.mode, encoding=self.encoding, newline="")

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, line: str):
        """Write one log line to file."""
        if self._file:
            self._file.write(line + os.linesep)
            if self.autoflush:
                self._file.flush()

    def write_lines(self, lines: Iterable[str]):
        """Write several log lines."""
        for line in lines:
            self.write(line)

    def flush(self):
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self):
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None

    def __enter__(self) -> "FileWriter":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
