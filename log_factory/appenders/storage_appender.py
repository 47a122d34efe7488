"""Rotating appender persisting entries to a key-value storage"""

import json
import sys
from collections import deque
from datetime import datetime, timezone
from typing import Any, Deque, List, Optional

from log_factory.appenders.base_appender import PersistenceAppender
from log_factory.storage.base_storage import Storage

# storage key of the rotating log
LOG_STORAGE_KEY = "log"

# count of retained log entries
LOG_ENTRY_COUNT = 200


class StorageAppender(PersistenceAppender):
    """
    Keep the most recent log entries in a storage, oldest first.

    Every entry is a list ``[timestamped_line, *extras]``. The whole buffer
    is written back as one JSON array on every call, so concurrent writers
    sharing the same storage key may lose each other's updates.
    """

    TIMESTAMP_FORMAT = "%a, %d %b %Y %H:%M:%S GMT"

    def __init__(
        self,
        storage: Optional[Storage],
        key: str = LOG_STORAGE_KEY,
        capacity: int = LOG_ENTRY_COUNT,
        error_stream=None,
    ):
        """
        Initialize storage appender.

        Args:
            storage: Storage receiving the log (None disables persistence)
            key: Storage key of the log
            capacity: Maximum number of retained entries
            error_stream: Stream for setup errors (default: sys.stderr)
        """
        if capacity <= 0:
            raise ValueError("capacity must be positive")

        self.storage = storage
        self.key = key
        self.capacity = capacity
        self._error_stream = error_stream
        self._cache: Optional[Deque[list]] = None

    def error(self, msg: Any, *args: Any) -> None:
        self._log_and_rotate(msg, args)

    def warn(self, msg: Any, *args: Any) -> None:
        self._log_and_rotate(msg, args)

    def info(self, msg: Any, *args: Any) -> None:
        self._log_and_rotate(msg, args)

    def debug(self, msg: Any, *args: Any) -> None:
        self._log_and_rotate(msg, args)

    def trace(self, msg: Any, *args: Any) -> None:
        self._log_and_rotate(msg, args)

    def dir(self, obj: Any) -> None:
        self._log_and_rotate(obj)

    def dirxml(self, obj: Any) -> None:
        self._log_and_rotate(obj)

    def get_last_log(self) -> List[list]:
        """Read the stored entries fresh from storage."""
        entries = self._read()
        return entries if entries is not None else []

    def _read(self) -> Optional[list]:
        if self.storage is None:
            return None
        try:
            parsed = json.loads(self.storage.get_item(self.key))
        except (TypeError, ValueError, RecursionError):
            return None
        return parsed if isinstance(parsed, list) else None

    def _timestamp(self) -> str:
        return datetime.now(timezone.utc).strftime(self.TIMESTAMP_FORMAT)

    def _log_and_rotate(self, obj: Any, extras: tuple = ()) -> None:
        if self.storage is None:
            stream = self._error_stream or sys.stderr
            print("StorageAppender not initialized correctly! No storage configured.", file=stream)
            return

        # fill cache if necessary
        if self._cache is None:
            self._cache = deque(self._read() or [], maxlen=self.capacity)

        # the deque evicts the oldest entry once capacity is reached
        self._cache.append([f"{self._timestamp()} {obj}", *extras])

        self.storage.set_item(self.key, json.dumps(list(self._cache), default=str))

    def __repr__(self) -> str:
        return f"StorageAppender(key='{self.key}', capacity={self.capacity})"
