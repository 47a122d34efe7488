"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Any

from log_factory.core.log_level import LogLevel


class BaseFormatter(ABC):
    """
    Abstract base class for message formatters.

    Formatters turn a gated log call into the text line handed to appenders.
    """

    @abstractmethod
    def format(self, level: LogLevel, logger_name: str, message: Any) -> str:
        """
        Format a log message into a string.

        Args:
            level: The level the message is logged on
            logger_name: Name of the emitting logger
            message: The primary message value

        Returns:
            Formatted string
        """
        pass

    def __call__(self, level: LogLevel, logger_name: str, message: Any) -> str:
        """Allow formatters to be callable."""
        return self.format(level, logger_name, message)
