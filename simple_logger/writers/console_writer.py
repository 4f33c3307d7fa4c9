"""Console writer"""

import os
import sys


class ConsoleWriter:
    """Write formatted log lines to a console stream."""

    def __init__(self, stream=None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, looked up on every write)
        """
        self._stream = stream

    @property
    def stream(self):
        return self._stream or sys.stdout

    def write(self, line: str):
        """Write one log line to the console."""
        self.stream.write(line + os.linesep)
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()

    def close(self):
        """Console streams are owned by the process, never closed here."""
        self._stream = None
