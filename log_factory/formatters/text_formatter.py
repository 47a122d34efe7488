"""
Text formatter with customizable template
"""

from typing import Any

from log_factory.core.log_level import LogLevel
from log_factory.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log messages using a customizable template.
    """

    DEFAULT_TEMPLATE = "[{level}] - {logger}: {message}"

    def __init__(self, template: str = None):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {level}: Log level name
                     - {logger}: Logger name
                     - {message}: Log message

        Example:
            # Default format: "[INFO] - app: started"
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{logger} {level}: {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE

    def format(self, level: LogLevel, logger_name: str, message: Any) -> str:
        """
        Format log message using the template.

        Args:
            level: Log level
            logger_name: Logger name
            message: Log message

        Returns:
            Formatted string
        """
        format_dict = {
            "level": level.name,
            "logger": logger_name,
            "message": message,
        }

        try:
            return self.template.format(**format_dict)
        except (KeyError, IndexError) as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
