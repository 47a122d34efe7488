"""In-memory appender capturing every call"""

from typing import Any, List, Tuple

from log_factory.appenders.base_appender import Appender


class MemoryAppender(Appender):
    """
    Keep every received call in memory.

    Each call is recorded as ``(method_name, args)`` where ``args`` holds the
    arguments exactly as they were passed.
    """

    def __init__(self):
        self.calls: List[Tuple[str, tuple]] = []

    def error(self, msg: Any, *args: Any) -> None:
        self.calls.append(("error", (msg,) + args))

    def warn(self, msg: Any, *args: Any) -> None:
        self.calls.append(("warn", (msg,) + args))

    def info(self, msg: Any, *args: Any) -> None:
        self.calls.append(("info", (msg,) + args))

    def debug(self, msg: Any, *args: Any) -> None:
        self.calls.append(("debug", (msg,) + args))

    def trace(self, msg: Any, *args: Any) -> None:
        self.calls.append(("trace", (msg,) + args))

    def dir(self, obj: Any) -> None:
        self.calls.append(("dir", (obj,)))

    def dirxml(self, obj: Any) -> None:
        self.calls.append(("dirxml", (obj,)))

    def group(self, msg: Any, *args: Any) -> None:
        self.calls.append(("group", (msg,) + args))

    def group_end(self) -> None:
        self.calls.append(("group_end", ()))

    def messages(self, method: str) -> List[Any]:
        """
        Get the primary values received by one method.

        Args:
            method: Appender method name, e.g. "info"

        Returns:
            First positional argument of every matching call, in order
        """
        return [args[0] for name, args in self.calls if name == method and args]

    def clear(self) -> None:
        """Forget all recorded calls."""
        self.calls.clear()

    def __len__(self) -> int:
        return len(self.calls)
