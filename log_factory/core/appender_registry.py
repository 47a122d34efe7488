"""
Catalog of known appenders

An entry is either a ready appender instance or a zero-argument producer
that builds a fresh appender on every activation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from log_factory.appenders.base_appender import Appender

AppenderProducer = Callable[[], Appender]


class RegistrationKind(Enum):
    """How a registered appender is obtained."""

    INSTANCE = "instance"
    PRODUCER = "producer"


@dataclass(frozen=True)
class AppenderRegistration:
    """A catalog entry: an appender instance or a producer of one."""

    kind: RegistrationKind
    target: Union[Appender, AppenderProducer]

    @classmethod
    def of_instance(cls, appender: Appender) -> "AppenderRegistration":
        return cls(RegistrationKind.INSTANCE, appender)

    @classmethod
    def of_producer(cls, producer: AppenderProducer) -> "AppenderRegistration":
        return cls(RegistrationKind.PRODUCER, producer)

    @classmethod
    def wrap(cls, value: Union[Appender, AppenderProducer]) -> "AppenderRegistration":
        """
        Build an entry from an appender or a producer.

        Raises:
            TypeError: If value is neither an Appender nor callable
        """
        if isinstance(value, Appender):
            return cls.of_instance(value)
        if callable(value):
            return cls.of_producer(value)
        raise TypeError(f"expected an Appender or a producer, got {type(value).__name__}")

    def resolve(self) -> Appender:
        """Return the instance, invoking the producer if needed."""
        if self.kind is RegistrationKind.PRODUCER:
            return self.target()
        return self.target


class AppenderRegistry:
    """Mapping from appender key to registration."""

    def __init__(self):
        self._entries: Dict[str, AppenderRegistration] = {}

    def register(self, key: str, appender: Union[Appender, AppenderProducer]) -> None:
        """Add or overwrite the entry for key."""
        self._entries[key] = AppenderRegistration.wrap(appender)

    def unregister(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def get(self, key: str) -> Optional[Appender]:
        """
        Resolve an appender by key.

        Returns:
            The appender (fresh for producer entries), or None if the key is unknown
        """
        if not isinstance(key, str):
            return None
        entry = self._entries.get(key)
        if entry is None:
            return None
        return entry.resolve()

    def keys(self) -> List[str]:
        return list(self._entries.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
