"""
Log level enumeration and normalization

Levels are ordered by verbosity: a higher value means more output.
"""

from enum import IntEnum
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    A message logged on level X passes when X <= the logger's effective level,
    so OFF silences everything and TRACE lets everything through.
    """

    OFF = 0         # Logging disabled
    ERROR = 1       # Error messages
    WARN = 2        # Warning messages
    INFO = 3        # Informational messages
    DEBUG = 4       # Debug information
    TRACE = 5       # Most verbose, detailed tracing

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[37m",     # White
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {level: level.name for level in LogLevel}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}

# Root level used when nothing else is configured
DEFAULT_ROOT_LEVEL = LogLevel.INFO


def _is_numeric_string(value: str) -> bool:
    if not value.strip():
        return True
    try:
        float(value)
    except ValueError:
        return False
    return True


def get_valid_level(value: Any) -> Optional[LogLevel]:
    """
    Turn the given value into a valid log level.

    Accepts a level name ("DEBUG"), a numeric code (4) or a LogLevel.
    Numeric strings such as "4" are rejected, only names are looked up.

    Args:
        value: Value to normalize

    Returns:
        The matching LogLevel, or None if the value is not a valid level.
        Never raises.
    """
    if value is None:
        return None

    if isinstance(value, LogLevel):
        return value

    if isinstance(value, str):
        if _is_numeric_string(value):
            return None
        return LEVEL_FROM_NAME.get(value)

    if isinstance(value, bool):
        return None

    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)

    if isinstance(value, int):
        try:
            return LogLevel(value)
        except ValueError:
            return None

    return None


def level_name(level: Optional[LogLevel]) -> Optional[str]:
    """Return the name of a level, or None for an absent level."""
    if level is None:
        return None
    return LEVEL_NAMES[level]
