"""
Core module for the logging facility

This module contains the fundamental classes:
- LogLevel: Log level enumeration and normalization
- Logger: Named, level-gated logger
- LoggerFactory: Registry and runtime configuration of loggers
- LoggerFactoryConfig: Factory options
- PersistedConfig: Stored configuration record
"""

from log_factory.core.log_level import LogLevel, DEFAULT_ROOT_LEVEL, get_valid_level
from log_factory.core.logger import Logger
from log_factory.core.logger_config import LoggerFactoryConfig
from log_factory.core.persisted_config import PersistedConfig
from log_factory.core.appender_registry import AppenderRegistration, AppenderRegistry
from log_factory.core.logger_factory import LoggerFactory

__all__ = [
    "LogLevel",
    "DEFAULT_ROOT_LEVEL",
    "get_valid_level",
    "Logger",
    "LoggerFactoryConfig",
    "PersistedConfig",
    "AppenderRegistration",
    "AppenderRegistry",
    "LoggerFactory",
]
