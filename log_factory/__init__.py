"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Log Factory - A leveled logging facility with runtime reconfiguration
Named loggers, pluggable appenders and a persisted level configuration
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_factory.core.log_level import LogLevel, DEFAULT_ROOT_LEVEL, get_valid_level
from log_factory.core.logger import Logger
from log_factory.core.logger_config import LoggerFactoryConfig
from log_factory.core.logger_factory import LoggerFactory

# Import submodules (not all classes by default)
from log_factory import appenders
from log_factory import formatters
from log_factory import storage


def get_logger(identifier: str) -> Logger:
    """Get a logger from the shared LoggerFactory instance."""
    return LoggerFactory.get_instance().get_logger(identifier)


__all__ = [
    "LogLevel",
    "DEFAULT_ROOT_LEVEL",
    "get_valid_level",
    "Logger",
    "LoggerFactory",
    "LoggerFactoryConfig",
    "get_logger",
    "appenders",
    "formatters",
    "storage",
]
