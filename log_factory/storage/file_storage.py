"""File-backed storage"""

from urllib.parse import quote, unquote
from pathlib import Path
from typing import List, Optional

from log_factory.storage.base_storage import Storage


class FileStorage(Storage):
    """
    Store every key in its own file below a directory.

    Values survive process restarts, which makes this the counterpart of a
    browser's local storage.
    """

    SUFFIX = ".json"

    def __init__(self, directory: str, encoding: str = "utf-8"):
        """
        Initialize file storage.

        Args:
            directory: Directory holding one file per key (created on demand)
            encoding: File encoding (default: 'utf-8')
        """
        self.directory = Path(directory)
        self.encoding = encoding

    def _path(self, key: str) -> Path:
        if not key:
            raise ValueError("storage key must not be empty")
        return self.directory / f"{quote(key, safe='')}{self.SUFFIX}"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding=self.encoding)

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(str(value), encoding=self.encoding)

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def keys(self) -> List[str]:
        """Stored keys, decoded from their file names."""
        if not self.directory.exists():
            return []
        return sorted(
            unquote(path.name[: -len(self.SUFFIX)])
            for path in self.directory.glob(f"*{self.SUFFIX}")
        )

    def clear(self) -> None:
        if not self.directory.exists():
            return
        for path in self.directory.glob(f"*{self.SUFFIX}"):
            path.unlink()

    def __repr__(self) -> str:
        return f"FileStorage(directory='{self.directory}')"
