"""
Key-value storage interface

Synchronous string storage used to persist the factory configuration and
the rotating log.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Storage(ABC):
    """Abstract synchronous key-value store for strings."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read a value.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all keys."""
        pass
