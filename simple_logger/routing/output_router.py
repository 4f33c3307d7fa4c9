"""
Output router resolving the sinks a logger writes to

Sinks are resolved once, on the first accepted entry, from the logger's
configuration. A missing log directory silently disables file output.
"""

from __future__ import annotations
import sys
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from simple_logger.core.logger_config import LoggerConfig
from simple_logger.writers.console_writer import ConsoleWriter
from simple_logger.writers.file_writer import FileWriter

STDOUT_SINK = "stdout"


class OutputRouter:
    """
    Routes formatted log lines to every active sink.

    States: uninitialized until ``ensure_initialized()`` runs, then ready
    until ``reset()``.

    Thread Safety:
        All methods are thread-safe for concurrent access.

    Example:
        router = OutputRouter(LoggerConfig(print_to_console=True))
        router.ensure_initialized()
        router.write("2018-04-09T15:17:03+02:00 [INFO] : started")
    """

    def __init__(self, config: LoggerConfig):
        """Initialize output router."""
        self._config = config
        self._writers: Dict[str, Any] = {}
        self._file_path: Optional[Path] = None
        self._ready = False
        self._lock = threading.RLock()

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def file_path(self) -> Optional[Path]:
        """Log file path resolved at initialization; None if the directory was missing."""
        return self._file_path

    def ensure_initialized(self) -> None:
        """
        Resolve and open sinks; executed only once until ``reset()``.
        """
        with self._lock:
            if self._ready:
                return

            if self._config.print_to_console:
                self._writers[STDOUT_SINK] = ConsoleWriter()

            if self._config.log_directory.is_dir():
                self._file_path = self._config.file_path

            if self._config.write_to_file and self._file_path is not None:
                try:
                    self._writers[str(self._file_path)] = FileWriter(
                        self._file_path,
                        mode=self._config.file_mode,
                        autoflush=True,
                    )
                except OSError as e:
                    print(f"Cannot open log file {self._file_path}: {e}", file=sys.stderr)

            self._ready = True

    def get_writer(self, name: str) -> Optional[Any]:
        """
        Get an active sink by identifier.

        Args:
            name: ``"stdout"`` or the resolved file path

        Returns:
            Writer instance or None if not active
        """
        with self._lock:
            return self._writers.get(name)

    def get_sink_names(self) -> List[str]:
        """Identifiers of all active sinks."""
        with self._lock:
            return list(self._writers.keys())

    def has_sinks(self) -> bool:
        with self._lock:
            return bool(self._writers)

    def write(self, line: str) -> int:
        """
        Write a formatted line to every active sink.

        A failing sink is reported to stderr and does not stop the others.

        Returns:
            Number of sinks that received the line
        """
        with self._lock:
            written = 0
            for name, writer in self._writers.items():
                try:
                    writer.write(line)
                    written += 1
                except Exception as e:
                    print(f"Writer error ({name}): {e}", file=sys.stderr)
            return written

    def flush(self) -> None:
        """Flush all sinks."""
        with self._lock:
            for writer in self._writers.values():
                writer.flush()

    def reset(self) -> None:
        """Close every sink and return to the uninitialized state."""
        with self._lock:
            for writer in self._writers.values():
                writer.close()
            self._writers.clear()
            self._file_path = None
            self._ready = False

    def __repr__(self) -> str:
        """String representation."""
        return f"OutputRouter(ready={self._ready}, sinks={list(self._writers)})"
