"""
Named logger gated by a root level and an optional local override
"""

from __future__ import annotations
from typing import Optional, List, Any

from log_factory.core.log_level import LogLevel, DEFAULT_ROOT_LEVEL, get_valid_level
from log_factory.formatters.base_formatter import BaseFormatter
from log_factory.formatters.text_formatter import TextFormatter


class Logger:
    """
    Logger emitting messages along with a log level.

    The effective level is the local level if one is set, the root level
    otherwise. Loggers are normally obtained from a LoggerFactory, which keeps
    root level and appenders of all its loggers in sync.
    """

    def __init__(
        self,
        name: str,
        root_level: LogLevel = DEFAULT_ROOT_LEVEL,
        level: Optional[LogLevel] = None,
        appenders: Optional[List[Any]] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        self.name = name
        self.appenders: List[Any] = appenders if appenders is not None else []
        self.formatter = formatter or TextFormatter()
        self._root_level = DEFAULT_ROOT_LEVEL
        self._level: Optional[LogLevel] = None
        self._effective_level = DEFAULT_ROOT_LEVEL
        self._metrics = {"logged": 0, "suppressed": 0}

        self.root_level = root_level
        self.level = level

    @property
    def root_level(self) -> LogLevel:
        return self._root_level

    @root_level.setter
    def root_level(self, value) -> None:
        # an invalid root level keeps the current one
        valid = get_valid_level(value)
        if valid is not None:
            self._root_level = valid
        self._calculate_effective_level()

    @property
    def level(self) -> Optional[LogLevel]:
        """The local level of this logger, None if unset."""
        return self._level

    @level.setter
    def level(self, value) -> None:
        self._level = get_valid_level(value)
        self._calculate_effective_level()

    @property
    def effective_level(self) -> LogLevel:
        return self._effective_level

    def _calculate_effective_level(self) -> None:
        self._effective_level = self._level if self._level is not None else self._root_level

    def is_trace_enabled(self) -> bool:
        return self._should_log(LogLevel.TRACE)

    def is_debug_enabled(self) -> bool:
        return self._should_log(LogLevel.DEBUG)

    def is_info_enabled(self) -> bool:
        return self._should_log(LogLevel.INFO)

    def is_warn_enabled(self) -> bool:
        return self._should_log(LogLevel.WARN)

    def is_error_enabled(self) -> bool:
        return self._should_log(LogLevel.ERROR)

    def error(self, msg: Any, *args: Any) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, "error", msg, args)

    def warn(self, msg: Any, *args: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARN, "warn", msg, args)

    def info(self, msg: Any, *args: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, "info", msg, args)

    def debug(self, msg: Any, *args: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, "debug", msg, args)

    def trace(self, msg: Any, *args: Any) -> None:
        """Log trace message."""
        self._log(LogLevel.TRACE, "trace", msg, args)

    def dir(self, obj: Any, level: LogLevel = LogLevel.DEBUG) -> None:
        """
        Log a readable representation of the given object.

        The object is handed to the appenders as is, without formatting.

        Args:
            obj: The object to log
            level: The level to gate on (default: DEBUG)
        """
        self._log(self._gate(level), "dir", obj, (), format_message=False)

    def dirxml(self, obj: Any, level: LogLevel = LogLevel.DEBUG) -> None:
        """
        Log the xml representation of the given object.

        Args:
            obj: The object to log, typically an ElementTree element
            level: The level to gate on (default: DEBUG)
        """
        self._log(self._gate(level), "dirxml", obj, (), format_message=False)

    def group(self, msg: Any, *args: Any) -> None:
        """Start a group."""
        self._log(LogLevel.DEBUG, "group", msg, args)

    def group_end(self) -> None:
        """End a group."""
        if self._should_log(LogLevel.DEBUG):
            for appender in self.appenders:
                appender.group_end()
            self._metrics["logged"] += 1
        else:
            self._metrics["suppressed"] += 1

    @staticmethod
    def _gate(level) -> LogLevel:
        valid = get_valid_level(level)
        return valid if valid is not None else LogLevel.DEBUG

    def _log(
        self,
        required_level: LogLevel,
        method: str,
        msg: Any,
        args: tuple,
        format_message: bool = True,
    ) -> None:
        """Dispatch to all appenders if the required level passes."""
        if not self._should_log(required_level):
            self._metrics["suppressed"] += 1
            return

        value = self.formatter.format(required_level, self.name, msg) if format_message else msg
        for appender in self.appenders:
            getattr(appender, method)(value, *args)
        self._metrics["logged"] += 1

    def _should_log(self, level: LogLevel) -> bool:
        return level <= self._effective_level

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        return self._metrics.copy()

    def __repr__(self) -> str:
        level = self._level.name if self._level is not None else None
        return f"Logger(name='{self.name}', level={level}, root={self._root_level.name})"
