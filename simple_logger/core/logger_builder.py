"""Logger builder pattern"""

from typing import Optional, Union
from pathlib import Path

from simple_logger.core.logger import Logger
from simple_logger.core.logger_config import LoggerConfig
from simple_logger.core.log_level import LogLevel
from simple_logger.formatters.base_formatter import BaseFormatter


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Each build produces an independent logger "profile" with its own
    configuration, buffer, timers and sinks.

    Example:
        logger = (LoggerBuilder()
            .with_name("importer")
            .with_level("info")
            .with_console(False)
            .with_file("/var/log/importer", "run", append=False)
            .build())
    """

    def __init__(self):
        self._config = LoggerConfig()
        self._formatter: Optional[BaseFormatter] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set the least severe level that is kept."""
        self._config.level_threshold = level
        return self

    def with_console(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable console output."""
        self._config.print_to_console = enabled
        return self

    def with_file(
        self,
        directory: Union[str, Path],
        file_name: str = "log",
        extension: str = "log",
        append: bool = True,
    ) -> "LoggerBuilder":
        """Enable file output."""
        self._config.write_to_file = True
        self._config.log_directory = Path(directory)
        self._config.log_file_name = file_name
        self._config.log_file_extension = extension
        self._config.append_mode = append
        return self

    def with_append(self, enabled: bool = True) -> "LoggerBuilder":
        """Append to (True) or overwrite (False) the log file."""
        self._config.append_mode = enabled
        return self

    def with_default_timer(self, name: str) -> "LoggerBuilder":
        """Set the name used by timers started without a name."""
        self._config.default_timer_name = name
        return self

    def with_custom_level(self, name: str, code: int) -> "LoggerBuilder":
        """
        Register an extra level with a syslog-style severity code.

        Example:
            builder.with_custom_level("notice", 5)
        """
        self._config.custom_levels[name.lower()] = code
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LoggerBuilder":
        """Use a custom line formatter."""
        self._formatter = formatter
        return self

    def build_config(self) -> LoggerConfig:
        """
        Build a validated copy of the configuration.

        Raises:
            ValueError: If any configured value is invalid
        """
        c = self._config
        return LoggerConfig(
            name=c.name,
            level_threshold=c.level_threshold,
            default_timer_name=c.default_timer_name,
            custom_levels=dict(c.custom_levels),
            print_to_console=c.print_to_console,
            write_to_file=c.write_to_file,
            log_directory=c.log_directory,
            log_file_name=c.log_file_name,
            log_file_extension=c.log_file_extension,
            append_mode=c.append_mode,
        )

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(self.build_config(), formatter=self._formatter)
