"""
Log formatters module

Provides the formatter interface and the default one-line text formatter.
"""

from simple_logger.formatters.base_formatter import BaseFormatter
from simple_logger.formatters.text_formatter import TextFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
]
