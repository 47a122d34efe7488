"""
Logger factory - registry of named loggers and their configuration

The factory caches loggers by name, resolves their levels from a root level
plus per-logger overrides, and persists that configuration to a storage so
it survives restarts. The whole configuration can be changed at runtime,
e.g. from an interactive prompt after ``LoggerFactory.init`` exposed it.
"""

from __future__ import annotations
import re
import sys
import threading
from typing import Any, Dict, List, Optional, Union

from log_factory.appenders.base_appender import Appender
from log_factory.appenders.console_appender import ConsoleAppender
from log_factory.console.namespace_binder import bind_factory
from log_factory.core.appender_registry import AppenderProducer, AppenderRegistry
from log_factory.core.log_level import (
    DEFAULT_ROOT_LEVEL,
    LogLevel,
    get_valid_level,
    level_name,
)
from log_factory.core.logger import Logger
from log_factory.core.logger_config import DEFAULT_CONSOLE_CONTEXT, LoggerFactoryConfig
from log_factory.core.persisted_config import CONFIG_STORAGE_KEY, ROOT_KEY, PersistedConfig
from log_factory.storage.base_storage import Storage

# key of the console appender registered on init
CONSOLE_APPENDER_KEY = "console"

# name used for loggers requested with an invalid identifier
DEFAULT_LOGGER_NAME = "default"


class LoggerFactory:
    """
    Factory for retrieving loggers by name.

    Usage:
        factory = LoggerFactory()
        factory.init(storage=FileStorage(".logstate"))
        log = factory.get_logger("app.db")
        log.info("connected")

        factory.sll("app.*", LogLevel.DEBUG)   # raise verbosity at runtime
        factory.level = "WARN"                 # change the root level

    A process-wide instance is available through ``get_instance()``;
    independent instances can be created freely, e.g. in tests.
    """

    _instance: Optional["LoggerFactory"] = None
    _lock = threading.Lock()

    # Re-export levels for convenience: lf.DEBUG, etc.
    OFF = LogLevel.OFF
    ERROR = LogLevel.ERROR
    WARN = LogLevel.WARN
    INFO = LogLevel.INFO
    DEBUG = LogLevel.DEBUG
    TRACE = LogLevel.TRACE

    def __init__(self, stream=None, error_stream=None):
        """
        Initialize an unconfigured factory.

        Args:
            stream: Stream for notices and listings (default: sys.stdout)
            error_stream: Stream for reported errors (default: sys.stderr)
        """
        self._stored_levels: Dict[str, LogLevel] = {}
        self._root_level: LogLevel = DEFAULT_ROOT_LEVEL
        self._cached_loggers: Dict[str, Logger] = {}
        self._appenders: Dict[str, Appender] = {}
        self._registry = AppenderRegistry()
        self._stream = stream
        self._error_stream = error_stream
        self.storage: Optional[Storage] = None
        self.console_context = DEFAULT_CONSOLE_CONTEXT
        self._init_levels()

    @classmethod
    def get_instance(cls) -> "LoggerFactory":
        """Get or create the shared instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance. The next get_instance() builds a new one."""
        with cls._lock:
            cls._instance = None

    @property
    def stream(self):
        return self._stream or sys.stdout

    @property
    def error_stream(self):
        return self._error_stream or sys.stderr

    def init(
        self,
        namespace: Any = None,
        storage: Optional[Storage] = None,
        config: Optional[LoggerFactoryConfig] = None,
    ) -> "LoggerFactory":
        """
        Initialize the factory.

        Activates the console appender, restores the stored configuration
        and, if enabled, exposes the factory on the given namespace.

        Args:
            namespace: Object or mapping to expose the factory on
            storage: Storage for the configuration (None: not persisted)
            config: Factory options (default: LoggerFactoryConfig.default())

        Returns:
            Self for method chaining
        """
        config = config or LoggerFactoryConfig.default()

        self.register_appender(CONSOLE_APPENDER_KEY, ConsoleAppender())
        self._activate_appenders({CONSOLE_APPENDER_KEY: self.get_valid_appender(CONSOLE_APPENDER_KEY)})
        self.storage = storage

        root_level = config.valid_root_level
        if root_level is not None:
            self._root_level = root_level
            self._stored_levels[ROOT_KEY] = root_level

        self.restore_config()

        if not config.suppress_bootstrap_logging:
            self._notice(f"Logging system initialized with root level '{level_name(self._root_level)}'.")

        # make ourselves available on the namespace if allowed by config
        if config.console_feature:
            self.console_context = config.console_context
            if namespace is not None:
                bind_factory(namespace, self.console_context, self)
                if not config.suppress_bootstrap_logging:
                    self._notice(f"Logging cli is available at '{self.console_context}'.")
            elif not config.suppress_bootstrap_logging:
                self._notice("No namespace available, reduced functionality.")

        return self

    @property
    def help(self) -> str:
        """Usage notes for interactive reconfiguration."""
        ctx = self.console_context
        levels = ", ".join(f"{ctx}.{level.name}" for level in reversed(LogLevel) if level)
        return (
            f"To set the root log level, type '{ctx}.level = <level>', where <level> is one of [{levels}].\n"
            f"To set the log level for a specific logger, type '{ctx}.set_log_level(<arg>, <level>)' "
            f"or '{ctx}.sll(<arg>, <level>)', where <arg> is either the name of the logger "
            f"(wildcard supported) or a logger's index and <level> is one of [{levels}].\n"
            f"To set the active appenders, type '{ctx}.set_log_appenders(<key>, ...)' or '{ctx}.sla(<key>, ...)'.\n"
            f"To view loggers and their indices, type '{ctx}.list_loggers()' or '{ctx}.ll()'."
        )

    @property
    def level(self) -> LogLevel:
        """The root level of the logging system."""
        return self._root_level

    @level.setter
    def level(self, value) -> None:
        the_level = get_valid_level(value)
        if the_level is None:
            return
        self._root_level = the_level
        self._stored_levels[ROOT_KEY] = the_level
        for logger in self._cached_loggers.values():
            logger.root_level = the_level
        self.store_config()

    @property
    def stored_levels(self) -> Dict[str, LogLevel]:
        return dict(self._stored_levels)

    @property
    def cached_loggers(self) -> Dict[str, Logger]:
        return dict(self._cached_loggers)

    @property
    def appenders(self) -> Dict[str, Appender]:
        """The active appenders by key."""
        return dict(self._appenders)

    @property
    def registered_appenders(self) -> List[str]:
        return self._registry.keys()

    def get_logger(self, identifier: str) -> Logger:
        """
        Get a logger for the given identifier.

        If a logger with that name has already been created, it is returned.
        Otherwise a new one is created from the current configuration.

        Args:
            identifier: Logger name, a non-empty string

        Returns:
            The cached or newly created logger, never None
        """
        name = identifier
        if not isinstance(name, str) or name == "":
            self._report_error(f"invalid argument to get_logger: {identifier!r}")
            # fall back to a default name
            name = DEFAULT_LOGGER_NAME

        # cache hit?
        logger = self._cached_loggers.get(name)
        if logger is not None:
            return logger

        logger = Logger(
            name,
            self._root_level,
            self._stored_override(name),
            list(self._appenders.values()),
        )
        self._cached_loggers[name] = logger
        return logger

    def describe_loggers(self) -> List[str]:
        """One line per cached logger, in index order."""
        return [
            f"    [{index}]: {logger.name} (level: {level_name(logger.level)}), "
            f"(root: {level_name(logger.root_level)})"
            for index, logger in enumerate(self._cached_loggers.values())
        ]

    def list_loggers(self) -> List[str]:
        """
        Print all cached loggers with their index and levels.

        Returns:
            The printed logger lines
        """
        lines = self.describe_loggers()
        if lines:
            self._notice("Available loggers")
            for line in lines:
                self._notice(line)
        else:
            self._notice("Found no loggers")
        return lines

    def ll(self) -> List[str]:
        """Shortcut for list_loggers."""
        return self.list_loggers()

    def clear(self) -> str:
        """
        Clear all configured levels and appenders.

        The root level is reset to DEFAULT_ROOT_LEVEL. Cached loggers are
        kept but lose their local level and appenders.
        """
        self._init_levels()
        self._activate_appenders({})
        for logger in self._cached_loggers.values():
            logger.level = None
            logger.root_level = self._root_level

        self.store_config()
        return f"Cleared log levels and appenders. New root level is '{level_name(self._root_level)}'."

    def set_log_level(self, selector: Union[str, int], level) -> str:
        """
        Set the level of the selected logger(s).

        A string selector is matched against the whole logger name, ``*``
        being a wildcard. An integer selector is the index shown by
        ``list_loggers``.

        Args:
            selector: Logger name pattern or index
            level: Level name, numeric code or LogLevel

        Returns:
            Message describing the outcome
        """
        the_level = get_valid_level(level)
        if the_level is None:
            message = f"Invalid level: {level!r}"
            self._report_error(message)
            return message

        regexp = None
        if isinstance(selector, str):
            pattern = selector.replace("*", ".*")
            name_mode = True
            try:
                regexp = re.compile(f"^{pattern}$")
            except re.error:
                regexp = None
        elif isinstance(selector, int) and not isinstance(selector, bool):
            name_mode = False
        else:
            return f"Unsupported argument: '{selector}'. Must be number or string."

        matches: List[str] = []
        # iterate over the cached loggers and modify the matching ones
        for index, (name, logger) in enumerate(self._cached_loggers.items()):
            if name_mode:
                hit = regexp is not None and regexp.match(name) is not None
            else:
                hit = index == selector
            if hit:
                logger.level = the_level
                # the root entry of the stored levels is not a logger override
                if name != ROOT_KEY:
                    self._stored_levels[name] = the_level
                matches.append(name)

        self.store_config()

        names = ", ".join(matches)
        if name_mode:
            if matches:
                return (
                    f"Successfully set {len(matches)} logger(s) whose name matches "
                    f"/{pattern}/ to level {the_level.name}: {names}"
                )
            return (
                f"No loggers matched /{pattern}/. You might want to use a wildcard? "
                f"Type '{self.console_context}.help' for help."
            )
        if matches:
            return f"Successfully set logger with index {selector} to level {the_level.name}: {names}"
        return f"Found no logger with index {selector}. Type '{self.console_context}.ll()' to view the indices."

    def sll(self, selector: Union[str, int], level) -> str:
        """Shortcut for set_log_level."""
        return self.set_log_level(selector, level)

    def set_log_appenders(self, *keys: str) -> str:
        """
        Replace the active appenders.

        Unknown keys are skipped. If none of the keys is known, the active
        appenders stay as they are.

        Args:
            keys: Keys of registered appenders

        Returns:
            Message describing the outcome
        """
        appenders: Dict[str, Appender] = {}
        for key in keys:
            appender = self.get_valid_appender(key)
            if appender is not None:
                appenders[key] = appender

        if not appenders:
            return f'No valid Appenders given: "{", ".join(str(key) for key in keys)}"!'

        self._activate_appenders(appenders)
        self.store_config()
        return f'Appenders "{", ".join(appenders)}" successfully set!'

    def sla(self, *keys: str) -> str:
        """Shortcut for set_log_appenders."""
        return self.set_log_appenders(*keys)

    @property
    def last_log(self) -> str:
        """The stored log of the active persistence appender, one entry per line."""
        appender = next(
            (a for a in self._appenders.values() if a.supports_replay()),
            None,
        )
        entries = appender.get_last_log() if appender is not None else []
        if not entries:
            return "No log entry exists!"
        return "\n".join(
            str(entry[0]) if isinstance(entry, list) and entry else str(entry)
            for entry in entries
        )

    def register_appender(self, key: str, appender: Union[Appender, AppenderProducer]) -> None:
        """
        Add an appender to the catalog, replacing an existing entry.

        Args:
            key: Appender key used by set_log_appenders and the stored config
            appender: Appender instance, or zero-argument callable building one
                      (called on every activation)
        """
        self._registry.register(key, appender)

    def get_valid_appender(self, key: str) -> Optional[Appender]:
        """
        Resolve a registered appender.

        Returns:
            The appender, or None if no appender is registered under key
        """
        return self._registry.get(key)

    def store_config(self) -> None:
        """Write the configuration to the storage."""
        if self.storage is None:
            return
        record = PersistedConfig(
            levels={name: level_name(level) for name, level in self._stored_levels.items()},
            appenders=list(self._appenders.keys()),
        )
        self.storage.set_item(CONFIG_STORAGE_KEY, record.to_json())

    def restore_config(self) -> None:
        """
        Load the configuration from the storage.

        The stored record is adopted only if it yields at least one valid
        level including the root level and at least one known appender.
        Otherwise the factory falls back to its defaults. Invalid entries
        inside an adopted record are dropped.
        """
        item = self.storage.get_item(CONFIG_STORAGE_KEY) if self.storage is not None else None
        if item:
            levels: Dict[str, LogLevel] = {}
            appenders: Dict[str, Appender] = {}
            root_level: Optional[LogLevel] = None
            try:
                record = PersistedConfig.from_json(item)
            except ValueError:
                record = None

            if record is not None:
                for name, value in record.levels.items():
                    the_level = get_valid_level(value)
                    if the_level is not None:
                        levels[name] = the_level
                root_level = levels.get(ROOT_KEY)
                for key in record.appenders:
                    appender = self.get_valid_appender(key)
                    if appender is not None:
                        appenders[key] = appender

            if levels and root_level is not None and appenders:
                self._stored_levels = levels
                self._root_level = root_level
                self._appenders = appenders
            else:
                self._init_levels()
                self._appenders = {}

        # now update all loggers which already have been created
        self._refresh_loggers()

    def _init_levels(self) -> None:
        """Reset the stored levels and the root level to their defaults."""
        self._stored_levels = {ROOT_KEY: DEFAULT_ROOT_LEVEL}
        self._root_level = DEFAULT_ROOT_LEVEL

    def _stored_override(self, name: str) -> Optional[LogLevel]:
        if name == ROOT_KEY:
            return None
        return self._stored_levels.get(name)

    def _activate_appenders(self, appenders: Dict[str, Appender]) -> None:
        self._appenders = dict(appenders)
        values = list(self._appenders.values())
        for logger in self._cached_loggers.values():
            logger.appenders = values

    def _refresh_loggers(self) -> None:
        values = list(self._appenders.values())
        for name, logger in self._cached_loggers.items():
            logger.level = self._stored_override(name)
            logger.root_level = self._root_level
            logger.appenders = values

    def _notice(self, message: str) -> None:
        print(message, file=self.stream)

    def _report_error(self, message: str) -> None:
        print(message, file=self.error_stream)

    def __repr__(self) -> str:
        return (
            f"LoggerFactory(root={level_name(self._root_level)}, "
            f"loggers={len(self._cached_loggers)}, appenders={list(self._appenders)})"
        )
