"""
Logger configuration management
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union
from pathlib import Path

from simple_logger.core.log_level import LogLevel, SeverityTable


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Fields are read on every call, but sinks are resolved once, on the first
    accepted entry. Changing output fields after that requires
    ``Logger.reset()``.
    """

    # Basic settings
    name: str = "logger"
    level_threshold: Union[LogLevel, str] = "error"
    default_timer_name: str = "timer"
    custom_levels: Dict[str, int] = field(default_factory=dict)

    # Console settings
    print_to_console: bool = True

    # File settings
    write_to_file: bool = False
    log_directory: Path = field(default_factory=Path.cwd)
    log_file_name: str = "log"
    log_file_extension: str = "log"
    append_mode: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.default_timer_name:
            raise ValueError("default_timer_name cannot be empty")
        if not self.log_file_name:
            raise ValueError("log_file_name cannot be empty")

        # Convert log_directory to Path if it's a string
        if isinstance(self.log_directory, str):
            self.log_directory = Path(self.log_directory)

        # Raises ValueError for unknown thresholds or bad custom levels
        self.level_threshold = self.severity_table().normalize(self.level_threshold)

    def severity_table(self) -> SeverityTable:
        """Severity table including this config's custom levels."""
        return SeverityTable(self.custom_levels)

    @property
    def file_path(self) -> Path:
        """Log file path; the extension is omitted when empty."""
        filename = self.log_file_name
        if self.log_file_extension:
            filename += "." + self.log_file_extension
        return self.log_directory / filename

    @property
    def file_mode(self) -> str:
        """Open mode for file sinks and dumps."""
        return "a" if self.append_mode else "w"

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level_threshold=LogLevel.DEBUG,
            print_to_console=True,
        )

    @classmethod
    def quiet_config(cls, level_threshold: Union[LogLevel, str] = "debug") -> "LoggerConfig":
        """Create configuration that only keeps entries in memory."""
        return cls(
            level_threshold=level_threshold,
            print_to_console=False,
            write_to_file=False,
        )

    @classmethod
    def file_config(
        cls,
        directory: Union[str, Path],
        file_name: str = "log",
        extension: str = "log",
        append: bool = True,
        level_threshold: Optional[Union[LogLevel, str]] = None,
    ) -> "LoggerConfig":
        """Create configuration that writes to a file only."""
        return cls(
            level_threshold=level_threshold or "error",
            print_to_console=False,
            write_to_file=True,
            log_directory=Path(directory),
            log_file_name=file_name,
            log_file_extension=extension,
            append_mode=append,
        )
