"""Appenders module - Log output sinks"""

from log_factory.appenders.base_appender import Appender, PersistenceAppender
from log_factory.appenders.console_appender import ConsoleAppender
from log_factory.appenders.memory_appender import MemoryAppender
from log_factory.appenders.storage_appender import StorageAppender

__all__ = [
    "Appender",
    "PersistenceAppender",
    "ConsoleAppender",
    "MemoryAppender",
    "StorageAppender",
]
