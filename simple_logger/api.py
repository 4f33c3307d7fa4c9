"""
Module-level functions bound to the default shared logger

    import simple_logger as log

    log.configure(level_threshold="info", print_to_console=False)
    log.info("program started")
    log.start_timer()
    ...
    log.stop_timer()
    print(log.dump_to_string())
"""

from pathlib import Path
from typing import Any, Optional, Union

from simple_logger.core.log_entry import LogEntry
from simple_logger.core.log_level import LevelLike, LogLevel
from simple_logger.core.logger import Logger
from simple_logger.core.registry import LoggerRegistry, get_logger


def configure(**fields) -> Logger:
    """Replace the default logger's configuration (see LoggerConfig fields)."""
    return LoggerRegistry.configure(**fields)


def debug(message: Any, name: str = "") -> Optional[LogEntry]:
    return get_logger().debug(message, name)


def info(message: Any, name: str = "") -> Optional[LogEntry]:
    return get_logger().info(message, name)


def warning(message: Any, name: str = "") -> Optional[LogEntry]:
    return get_logger().warning(message, name)


def error(message: Any, name: str = "") -> Optional[LogEntry]:
    return get_logger().error(message, name)


def start_timer(name: Optional[str] = None) -> Optional[float]:
    return get_logger().start_timer(name)


def stop_timer(
    name: Optional[str] = None,
    decimals: int = 6,
    level: LevelLike = LogLevel.DEBUG,
) -> Optional[float]:
    return get_logger().stop_timer(name, decimals, level)


def dump_to_string() -> str:
    return get_logger().dump_to_string()


def dump_to_file(file_path: Optional[Union[str, Path]] = None) -> bool:
    return get_logger().dump_to_file(file_path)


def clear() -> None:
    get_logger().clear()
