"""Dict-backed storage"""

from typing import Dict, Optional

from log_factory.storage.base_storage import Storage


class MemoryStorage(Storage):
    """Process-local storage kept in a dictionary."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def keys(self):
        return list(self._items.keys())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: str) -> bool:
        return key in self._items
