"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger profiles
- LoggerRegistry: Shared logger per identity
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from simple_logger.core.logger import Logger
from simple_logger.core.logger_builder import LoggerBuilder
from simple_logger.core.registry import LoggerRegistry, get_logger
from simple_logger.core.log_entry import LogEntry
from simple_logger.core.log_level import LogLevel, SeverityTable, SEVERITY_CODES
from simple_logger.core.logger_config import LoggerConfig

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LoggerRegistry",
    "get_logger",
    "LogEntry",
    "LogLevel",
    "SeverityTable",
    "SEVERITY_CODES",
    "LoggerConfig",
]
