"""Console module - interactive access to a logger factory"""

from log_factory.console.namespace_binder import bind_factory, unbind_factory

__all__ = ["bind_factory", "unbind_factory"]
