"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Simple Logger - A minimal in-memory logger with console/file mirroring
and named timers
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from simple_logger.core.logger import Logger
from simple_logger.core.logger_builder import LoggerBuilder
from simple_logger.core.registry import LoggerRegistry, get_logger
from simple_logger.core.log_entry import LogEntry
from simple_logger.core.log_level import LogLevel
from simple_logger.core.logger_config import LoggerConfig
from simple_logger.api import (
    configure,
    debug,
    info,
    warning,
    error,
    start_timer,
    stop_timer,
    dump_to_string,
    dump_to_file,
    clear,
)

# Import submodules (not all classes by default)
from simple_logger import formatters
from simple_logger import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LoggerRegistry",
    "get_logger",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "configure",
    "debug",
    "info",
    "warning",
    "error",
    "start_timer",
    "stop_timer",
    "dump_to_string",
    "dump_to_file",
    "clear",
    "formatters",
    "writers",
]
