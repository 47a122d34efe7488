"""Storage module - synchronous key-value stores"""

from log_factory.storage.base_storage import Storage
from log_factory.storage.memory_storage import MemoryStorage
from log_factory.storage.file_storage import FileStorage

__all__ = ["Storage", "MemoryStorage", "FileStorage"]
