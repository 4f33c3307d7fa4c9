"""
Process-wide registry of shared logger instances

One Logger exists per identity for the lifetime of the process, so every
call site asking for the same name shares buffer, timers and sinks.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from simple_logger.core.logger import Logger
from simple_logger.core.logger_config import LoggerConfig

DEFAULT_IDENTITY = "default"


class LoggerRegistry:
    """
    Holds one shared Logger per identity.

    Example:
        logger = LoggerRegistry.get_logger("importer")
        logger.info("started")
        assert LoggerRegistry.get_logger("importer") is logger
    """

    _loggers: Dict[str, Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(
        cls,
        name: str = DEFAULT_IDENTITY,
        config: Optional[LoggerConfig] = None,
    ) -> Logger:
        """
        Get the shared logger for an identity, creating it on first use.

        Args:
            name: Logger identity
            config: Configuration used only when the logger is created

        Returns:
            Shared Logger instance
        """
        with cls._lock:
            logger = cls._loggers.get(name)
            if logger is None:
                if config is None:
                    config = LoggerConfig(name=name)
                logger = Logger(config)
                cls._loggers[name] = logger
            return logger

    @classmethod
    def configure(cls, name: str = DEFAULT_IDENTITY, **fields) -> Logger:
        """
        Replace the configuration of an identity.

        The previous logger for that identity is shut down; entries it
        held are discarded.

        Raises:
            ValueError: If a field value is invalid
        """
        fields.setdefault("name", name)
        config = LoggerConfig(**fields)
        with cls._lock:
            previous = cls._loggers.pop(name, None)
            if previous is not None:
                previous.shutdown()
            logger = Logger(config)
            cls._loggers[name] = logger
            return logger

    @classmethod
    def get_names(cls) -> List[str]:
        with cls._lock:
            return list(cls._loggers)

    @classmethod
    def reset(cls) -> None:
        """Shut down and forget every logger (used for testing)."""
        with cls._lock:
            for logger in cls._loggers.values():
                logger.shutdown()
            cls._loggers.clear()


def get_logger(name: str = DEFAULT_IDENTITY, config: Optional[LoggerConfig] = None) -> Logger:
    """Shortcut for ``LoggerRegistry.get_logger``."""
    return LoggerRegistry.get_logger(name, config)
