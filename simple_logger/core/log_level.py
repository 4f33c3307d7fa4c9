"""
Log level enumeration and severity table

Levels use syslog severity codes: a lower code means a more severe entry.
"""

from enum import IntEnum
from typing import Dict, Mapping, Optional, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values follow the syslog specification, so ``ERROR < WARNING < INFO < DEBUG``
    numerically. An entry is kept when its code is less than or equal to
    the code of the configured threshold.
    """

    ERROR = 3       # Explains why the program is going to crash
    WARNING = 4     # Something might go wrong
    INFO = 6        # Informational message for the user
    DEBUG = 7       # Diagnostic message for the developer

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")


# Mapping from level name to severity code
SEVERITY_CODES: Dict[str, int] = {level.name.lower(): int(level) for level in LogLevel}


LevelLike = Union[LogLevel, str]


class SeverityTable:
    """Resolve level names to severity codes, with optional custom levels."""

    def __init__(self, custom_levels: Optional[Mapping[str, int]] = None):
        self._codes: Dict[str, int] = dict(SEVERITY_CODES)
        for name, code in (custom_levels or {}).items():
            self.register(name, code)

    def register(self, name: str, code: int) -> None:
        """
        Register an additional level.

        Raises:
            ValueError: If the name is empty or the code is negative
        """
        if not name:
            raise ValueError("level name cannot be empty")
        if code < 0:
            raise ValueError(f"severity code for '{name}' cannot be negative")
        self._codes[name.lower()] = int(code)

    def normalize(self, level: LevelLike) -> str:
        """
        Return the canonical lowercase name of a level.

        Raises:
            ValueError: If the level is unknown
        """
        if isinstance(level, LogLevel):
            return level.name.lower()
        name = str(level).lower()
        if name not in self._codes:
            raise ValueError(f"Invalid log level: {level}")
        return name

    def code(self, level: LevelLike) -> int:
        """Severity code of a level."""
        return self._codes[self.normalize(level)]

    def allows(self, level: LevelLike, threshold: LevelLike) -> bool:
        """True if an entry at ``level`` passes ``threshold``."""
        return self.code(level) <= self.code(threshold)

    def names(self):
        return list(self._codes)

    def __contains__(self, level) -> bool:
        return isinstance(level, LogLevel) or str(level).lower() in self._codes
