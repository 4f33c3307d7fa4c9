"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from simple_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log line formatters.

    A formatter renders one LogEntry as a single line without side effects.
    It is also used for dumps, so it must accept None (an empty entry) and
    return an empty string for it.
    """

    @abstractmethod
    def format(self, entry: Optional[LogEntry]) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format, or None

        Returns:
            The formatted line, without a line terminator; "" for None
        """
        pass

    def __call__(self, entry: Optional[LogEntry]) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)
