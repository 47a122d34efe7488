"""
Appender interfaces

An appender receives already-gated, already-formatted log calls and
decides where they go.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class Appender(ABC):
    """
    Abstract base class for log appenders.

    The five severity writers take a primary value plus variadic extras,
    ``dir``/``dirxml`` take a single raw object. Grouping is optional and
    defaults to a no-op.
    """

    @abstractmethod
    def error(self, msg: Any, *args: Any) -> None:
        """Write an error message."""
        pass

    @abstractmethod
    def warn(self, msg: Any, *args: Any) -> None:
        """Write a warning message."""
        pass

    @abstractmethod
    def info(self, msg: Any, *args: Any) -> None:
        """Write an informational message."""
        pass

    @abstractmethod
    def debug(self, msg: Any, *args: Any) -> None:
        """Write a debug message."""
        pass

    @abstractmethod
    def trace(self, msg: Any, *args: Any) -> None:
        """Write a trace message."""
        pass

    @abstractmethod
    def dir(self, obj: Any) -> None:
        """Write a readable representation of the given object."""
        pass

    @abstractmethod
    def dirxml(self, obj: Any) -> None:
        """Write the xml representation of the given object."""
        pass

    def group(self, msg: Any, *args: Any) -> None:
        """Start a group."""

    def group_end(self) -> None:
        """End a group."""

    def supports_replay(self) -> bool:
        """Whether this appender can replay its history."""
        return False


class PersistenceAppender(Appender):
    """
    Appender that retains its output and can hand it back.
    """

    @abstractmethod
    def get_last_log(self) -> List[list]:
        """
        Get the stored log entries.

        Returns:
            Stored entries oldest first, empty if nothing is stored
        """
        pass

    def supports_replay(self) -> bool:
        return True
