"""Writers module - Log output handlers"""

from simple_logger.writers.console_writer import ConsoleWriter
from simple_logger.writers.file_writer import FileWriter

__all__ = ["ConsoleWriter", "FileWriter"]
