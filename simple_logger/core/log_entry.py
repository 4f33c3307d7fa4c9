"""
Log entry data structure
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message. Entries are
    immutable once appended to a logger's buffer.
    """

    timestamp: int
    level: str
    message: Any
    name: str = ""

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, str) or not self.level:
            raise TypeError("level must be a non-empty level name")
        if self.name is None:
            object.__setattr__(self, "name", "")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "timestamp": self.timestamp,
            "level": self.level,
            "name": self.name,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        return cls(
            timestamp=int(data["timestamp"]),
            level=data["level"],
            message=data["message"],
            name=data.get("name", ""),
        )
