"""
Text formatter producing one human-readable line per entry

    2018-04-09T15:17:03+02:00 [WARNING] : log line title => log line content
"""

from collections.abc import Mapping
from datetime import datetime
from pprint import pformat
from typing import Any, Optional

from simple_logger.core.log_entry import LogEntry
from simple_logger.formatters.base_formatter import BaseFormatter


def stringify(value: Any) -> str:
    """
    Convert any message value to its display string.

    Strings pass through unchanged; containers are pretty-printed with
    sorted keys so the output is deterministic.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return pformat(value)
    return str(value)


class TextFormatter(BaseFormatter):
    """
    Format log entries as ``<timestamp> [<LEVEL>] : [<name> => ]<message>``.
    """

    def __init__(self, separator: str = " => "):
        """
        Initialize text formatter.

        Args:
            separator: Text placed between the entry name and the message
        """
        self.separator = separator

    @staticmethod
    def format_timestamp(timestamp: int) -> str:
        """ISO-8601 local time with UTC offset, to the second."""
        return datetime.fromtimestamp(timestamp).astimezone().isoformat(timespec="seconds")

    def format(self, entry: Optional[LogEntry]) -> str:
        """
        Format log entry as a single line.

        Args:
            entry: Log entry to format; None yields an empty string

        Returns:
            Formatted string
        """
        if not entry:
            return ""

        line = f"{self.format_timestamp(entry.timestamp)} [{stringify(entry.level).upper()}] : "
        name = stringify(entry.name)
        if name:
            line += name + self.separator
        return line + stringify(entry.message)

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(separator='{self.separator}')"
