"""
Expose a logger factory on a namespace for interactive use
"""

from types import SimpleNamespace
from typing import Any, MutableMapping


def _get(target: Any, name: str) -> Any:
    if isinstance(target, MutableMapping):
        return target.get(name)
    return getattr(target, name, None)


def _set(target: Any, name: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)


def bind_factory(namespace: Any, context: str, factory: Any) -> Any:
    """
    Install a factory under a dotted path.

    Missing intermediate parts are created as SimpleNamespace objects.

    Args:
        namespace: Object or mapping to install into (e.g. the builtins module)
        context: Dotted attribute path, e.g. "lf" or "debug.lf"
        factory: The factory to install

    Returns:
        The installed factory

    Example:
        import builtins
        bind_factory(builtins, "lf", factory)
        # from any interactive prompt: lf.sll("app*", lf.DEBUG)
    """
    parts = [part for part in context.split(".") if part]
    if not parts:
        raise ValueError("context must name at least one attribute")

    target = namespace
    for part in parts[:-1]:
        child = _get(target, part)
        if child is None:
            child = SimpleNamespace()
            _set(target, part, child)
        target = child

    _set(target, parts[-1], factory)
    return factory


def unbind_factory(namespace: Any, context: str) -> None:
    """Remove a factory installed by bind_factory. Missing paths are ignored."""
    parts = [part for part in context.split(".") if part]
    target = namespace
    for part in parts[:-1]:
        target = _get(target, part)
        if target is None:
            return

    if not parts:
        return
    if isinstance(target, MutableMapping):
        target.pop(parts[-1], None)
    elif hasattr(target, parts[-1]):
        delattr(target, parts[-1])
