#!/usr/bin/env python3
"""Basic usage example"""

import builtins

from log_factory import LoggerFactory, LoggerFactoryConfig, LogLevel
from log_factory.appenders import StorageAppender
from log_factory.storage import FileStorage

def main():
    storage = FileStorage(".logstate")

    # Register a persistent appender and initialize the factory
    factory = LoggerFactory.get_instance()
    factory.register_appender("ls", StorageAppender(storage))
    factory.init(builtins, storage, LoggerFactoryConfig.console_config())

    db_logger = factory.get_logger("app.db")
    http_logger = factory.get_logger("app.http")

    # Log messages
    db_logger.trace("This is trace")
    db_logger.debug("This is debug")
    db_logger.info("Application started")
    http_logger.warn("This is warning")
    http_logger.error("This is error")

    # Reconfigure at runtime, the configuration is stored for the next run
    print(factory.sll("app.*", LogLevel.DEBUG))
    print(factory.sla("console", "ls"))
    db_logger.debug("Now visible")
    db_logger.dir({"pool_size": 5, "timeout": 30})
    factory.ll()

    print(factory.last_log)

if __name__ == "__main__":
    main()
