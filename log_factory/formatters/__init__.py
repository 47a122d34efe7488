"""
Formatters module

Provides formatter implementations for log message lines.
"""

from log_factory.formatters.base_formatter import BaseFormatter
from log_factory.formatters.text_formatter import TextFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
]
