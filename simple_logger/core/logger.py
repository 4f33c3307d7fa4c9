"""
Main Logger class - in-memory leveled log with optional console/file mirroring
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, List, Optional, Union
import atexit
import os
import sys
import threading
import time

from simple_logger.core.log_level import LevelLike, LogLevel, SeverityTable
from simple_logger.core.log_entry import LogEntry
from simple_logger.core.logger_config import LoggerConfig
from simple_logger.formatters.base_formatter import BaseFormatter
from simple_logger.formatters.text_formatter import TextFormatter
from simple_logger.routing.output_router import OutputRouter
from simple_logger.timing.timer_registry import TimerRegistry
from simple_logger.writers.file_writer import FileWriter


class Logger:
    """
    Main logger class.

    Every accepted entry is kept in memory and, if configured, mirrored to
    stdout and/or a log file. Sinks are resolved on the first accepted entry.

    Thread Safety:
        Buffer, timers and sinks are guarded by a single re-entrant lock.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        self._config = config or LoggerConfig.default()
        self._formatter = formatter or TextFormatter()
        self._severity = self._config.severity_table()
        self._severity_key = self._custom_levels_key()
        self._log: List[LogEntry] = []
        self._timers = TimerRegistry()
        self._router = OutputRouter(self._config)
        self._lock = threading.RLock()
        self._metrics = {"logged": 0, "suppressed": 0, "written": 0}

    def _custom_levels_key(self):
        return tuple(sorted(self._config.custom_levels.items()))

    @property
    def severity(self) -> SeverityTable:
        """Severity table, rebuilt when config.custom_levels changes."""
        key = self._custom_levels_key()
        if key != self._severity_key:
            self._severity = self._config.severity_table()
            self._severity_key = key
        return self._severity

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def router(self) -> OutputRouter:
        return self._router

    @property
    def formatter(self) -> BaseFormatter:
        return self._formatter

    @property
    def entries(self) -> List[LogEntry]:
        """Snapshot of the in-memory log."""
        with self._lock:
            return list(self._log)

    def is_enabled_for(self, level: LevelLike) -> bool:
        """
        Check whether an entry at ``level`` would be kept.

        Raises:
            ValueError: If the level or the configured threshold is unknown
        """
        return self.severity.allows(level, self._config.level_threshold)

    def log(self, level: LevelLike, message: Any, name: str = "") -> Optional[LogEntry]:
        """
        Add an entry to the log.

        Args:
            level: LogLevel member or level name (case-insensitive)
            message: Any value; stringified when formatted
            name: Optional title shown before the message

        Returns:
            The new entry, or None if the level is below the threshold

        Raises:
            ValueError: If the level name is unknown
        """
        level_name = self.severity.normalize(level)

        with self._lock:
            if not self.is_enabled_for(level_name):
                self._metrics["suppressed"] += 1
                return None

            entry = LogEntry(
                timestamp=int(time.time()),
                level=level_name,
                message=message,
                name=name or "",
            )
            self._log.append(entry)
            self._metrics["logged"] += 1

            if not self._router.is_ready:
                self._router.ensure_initialized()
                # Sinks stay open until shutdown, at the latest on exit
                atexit.register(self.shutdown)
            if self._router.has_sinks():
                if self._router.write(self._formatter.format(entry)):
                    self._metrics["written"] += 1

            return entry

    def debug(self, message: Any, name: str = "") -> Optional[LogEntry]:
        """Log a diagnostic message for the developer."""
        return self.log(LogLevel.DEBUG, message, name)

    def info(self, message: Any, name: str = "") -> Optional[LogEntry]:
        """Log an informational message for the user."""
        return self.log(LogLevel.INFO, message, name)

    def warning(self, message: Any, name: str = "") -> Optional[LogEntry]:
        """Log a warning that something might go wrong."""
        return self.log(LogLevel.WARNING, message, name)

    def error(self, message: Any, name: str = "") -> Optional[LogEntry]:
        """Log an error, usually followed by program termination."""
        return self.log(LogLevel.ERROR, message, name)

    def start_timer(self, name: Optional[str] = None) -> Optional[float]:
        """
        Start counting time, using ``name`` as identifier.

        Args:
            name: Timer name (default: config.default_timer_name)

        Returns:
            The start reading, or None if a timer with that name is already
            running
        """
        if name is None:
            name = self._config.default_timer_name
        return self._timers.start(name)

    def stop_timer(
        self,
        name: Optional[str] = None,
        decimals: int = 6,
        level: LevelLike = LogLevel.DEBUG,
    ) -> Optional[float]:
        """
        Stop counting time and log the elapsed amount.

        The entry reads ``"<seconds> seconds"`` titled ``"Elapsed time"`` for
        the default timer, or ``"Elapsed time for '<name>'"`` otherwise.

        Args:
            name: Timer name (default: config.default_timer_name)
            decimals: Fractional digits shown in the log entry
            level: Level of the elapsed-time entry

        Returns:
            Elapsed seconds (unrounded), or None if the timer is not running

        Raises:
            ValueError: If decimals is negative or the level is unknown
        """
        if decimals < 0:
            raise ValueError("decimals cannot be negative")
        self.severity.normalize(level)

        is_default_timer = name is None
        if is_default_timer:
            name = self._config.default_timer_name

        with self._lock:
            elapsed = self._timers.stop(name)
            if elapsed is None:
                return None

            title = "Elapsed time" if is_default_timer else f"Elapsed time for '{name}'"
            self.log(level, f"{elapsed:,.{decimals}f} seconds", title)
            return elapsed

    # JavaScript console-style aliases
    time = start_timer
    time_end = stop_timer

    def is_timer_running(self, name: Optional[str] = None) -> bool:
        if name is None:
            name = self._config.default_timer_name
        return self._timers.is_running(name)

    def running_timers(self) -> List[str]:
        return self._timers.names()

    def format_entry(self, entry: Optional[LogEntry]) -> str:
        """Render one entry as a single line."""
        return self._formatter.format(entry)

    def dump_to_string(self) -> str:
        """
        Dump the whole log to a string.

        Returns:
            One formatted line per entry, each followed by os.linesep
        """
        with self._lock:
            return "".join(self._formatter.format(entry) + os.linesep for entry in self._log)

    def dump_to_file(self, file_path: Optional[Union[str, Path]] = None) -> bool:
        """
        Dump the whole log to the given file.

        Useful when the file name is not known beforehand; otherwise use the
        real-time ``write_to_file`` option. The file is appended to or
        overwritten according to ``config.append_mode``.

        Args:
            file_path: Output path (default: the log file path resolved when
                       the first entry was recorded)

        Returns:
            True if the file was written, False if there was no path or its
            directory does not exist, or the file could not be
            written (the error is reported to stderr)
        """
        path = Path(file_path) if file_path else self._router.file_path
        if path is None or not path.parent.is_dir():
            return False

        with self._lock:
            lines = [self._formatter.format(entry) for entry in self._log]

        try:
            with FileWriter(path, mode=self._config.file_mode) as writer:
                writer.write_lines(lines)
        except OSError as e:
            print(f"Cannot write log file {path}: {e}", file=sys.stderr)
            return False
        return True

    def clear(self) -> None:
        """Empty the log; timers and sinks are left untouched."""
        with self._lock:
            self._log.clear()

    # Alias kept for callers used to the "clear log" name
    clear_log = clear

    def flush(self) -> None:
        """Flush all sinks."""
        self._router.flush()

    def reset(self) -> None:
        """
        Close sinks and forget entries, timers and metrics.

        The next accepted entry resolves sinks again from the current
        configuration.
        """
        with self._lock:
            atexit.unregister(self.shutdown)
            self._router.reset()
            self._log.clear()
            self._timers.clear()
            for key in self._metrics:
                self._metrics[key] = 0

    def shutdown(self) -> None:
        """Flush and close all sinks."""
        with self._lock:
            atexit.unregister(self.shutdown)
            if not self._router.is_ready:
                return
            self._router.flush()
            self._router.reset()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __len__(self) -> int:
        return len(self._log)

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name='{self._config.name}', threshold='{self._config.level_threshold}', entries={len(self._log)})"
