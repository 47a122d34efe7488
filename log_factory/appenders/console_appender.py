"""Console appender with ANSI colors"""

import pprint
import sys
from typing import Any, Optional
from xml.etree import ElementTree

from log_factory.appenders.base_appender import Appender
from log_factory.core.log_level import LogLevel


class ConsoleAppender(Appender):
    """Write log calls to the console with optional colors."""

    INDENT = "  "

    def __init__(self, colored: bool = False, stream=None, error_stream=None):
        """
        Initialize console appender.

        Args:
            colored: Use ANSI color codes
            stream: Output stream for info/debug/trace (default: sys.stdout)
            error_stream: Output stream for error/warn (default: sys.stderr)
        """
        self.colored = colored
        self._stream = stream
        self._error_stream = error_stream
        self._depth = 0

    @property
    def stream(self):
        return self._stream or sys.stdout

    @property
    def error_stream(self):
        return self._error_stream or sys.stderr

    def error(self, msg: Any, *args: Any) -> None:
        self._write(self.error_stream, self._join(msg, args), LogLevel.ERROR)

    def warn(self, msg: Any, *args: Any) -> None:
        self._write(self.error_stream, self._join(msg, args), LogLevel.WARN)

    def info(self, msg: Any, *args: Any) -> None:
        self._write(self.stream, self._join(msg, args), LogLevel.INFO)

    def debug(self, msg: Any, *args: Any) -> None:
        self._write(self.stream, self._join(msg, args), LogLevel.DEBUG)

    def trace(self, msg: Any, *args: Any) -> None:
        self._write(self.stream, self._join(msg, args), LogLevel.TRACE)

    def dir(self, obj: Any) -> None:
        self._write(self.stream, pprint.pformat(obj))

    def dirxml(self, obj: Any) -> None:
        if isinstance(obj, ElementTree.Element):
            text = ElementTree.tostring(obj, encoding="unicode")
        else:
            text = pprint.pformat(obj)
        self._write(self.stream, text)

    def group(self, msg: Any, *args: Any) -> None:
        self._write(self.stream, self._join(msg, args))
        self._depth += 1

    def group_end(self) -> None:
        if self._depth > 0:
            self._depth -= 1

    @staticmethod
    def _join(msg: Any, args: tuple) -> str:
        return " ".join(str(part) for part in (msg,) + args)

    def _write(self, stream, text: str, level: Optional[LogLevel] = None) -> None:
        indent = self.INDENT * self._depth
        lines = "\n".join(indent + line for line in text.split("\n"))

        # Add colors if enabled
        if self.colored and level is not None:
            lines = f"{level.color_code}{lines}{level.reset_code}"

        stream.write(lines + "\n")
        stream.flush()
