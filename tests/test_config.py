"""Tests for configuration objects, formatting and the namespace binder"""

import json
import types

import pytest

from log_factory import LoggerFactoryConfig, LogLevel
from log_factory.console import bind_factory, unbind_factory
from log_factory.core.persisted_config import PersistedConfig
from log_factory.formatters import TextFormatter


class TestLoggerFactoryConfig:
    """Test factory options."""

    def test_default_config(self):
        config = LoggerFactoryConfig.default()
        assert config.root_level is None
        assert config.console_feature is False
        assert config.console_context == "lf"
        assert config.suppress_bootstrap_logging is False

    def test_console_config(self):
        config = LoggerFactoryConfig.console_config("ctx")
        assert config.console_feature is True
        assert config.console_context == "ctx"

    def test_quiet_config(self):
        assert LoggerFactoryConfig.quiet_config().suppress_bootstrap_logging is True

    def test_root_level_normalized(self):
        assert LoggerFactoryConfig(root_level="WARN").valid_root_level is LogLevel.WARN
        assert LoggerFactoryConfig(root_level=5).valid_root_level is LogLevel.TRACE

    def test_invalid_root_level_is_ignored(self):
        assert LoggerFactoryConfig(root_level="bogus").valid_root_level is None
        assert LoggerFactoryConfig(root_level=42).valid_root_level is None

    def test_empty_context(self):
        with pytest.raises(ValueError):
            LoggerFactoryConfig(console_context="")


class TestPersistedConfig:
    """Test the stored configuration record."""

    def test_to_json(self):
        record = PersistedConfig(levels={"__root": "INFO", "app": "DEBUG"}, appenders=["console"])
        assert json.loads(record.to_json()) == {
            "levels": {"__root": "INFO", "app": "DEBUG"},
            "appenders": ["console"],
        }

    def test_from_json(self):
        record = PersistedConfig.from_json('{"levels": {"__root": "WARN"}, "appenders": ["ls"]}')
        assert record.levels == {"__root": "WARN"}
        assert record.appenders == ["ls"]

    def test_missing_fields_are_empty(self):
        record = PersistedConfig.from_json('{"levels": "nope"}')
        assert record.levels == {}
        assert record.appenders == []

    @pytest.mark.parametrize("text", ["{broken", "[1, 2]", "42", None, "[" * 100000])
    def test_invalid_json(self, text):
        with pytest.raises(ValueError):
            PersistedConfig.from_json(text)


class TestTextFormatter:
    """Test message formatting."""

    def test_default_template(self):
        assert TextFormatter().format(LogLevel.WARN, "app", "careful") == "[WARN] - app: careful"

    def test_message_braces_kept(self):
        assert TextFormatter()(LogLevel.INFO, "app", "{x}") == "[INFO] - app: {x}"

    def test_unknown_placeholder(self):
        result = TextFormatter("{nope} {message}").format(LogLevel.INFO, "app", "msg")
        assert result.startswith("[FORMAT ERROR:")
        assert result.endswith("msg")


class TestNamespaceBinder:
    """Test exposing a factory on a namespace."""

    def test_bind_mapping(self):
        namespace = {}
        factory = object()
        bind_factory(namespace, "lf", factory)
        assert namespace["lf"] is factory

    def test_bind_dotted_path(self):
        namespace = types.SimpleNamespace()
        factory = object()
        bind_factory(namespace, "debug.tools.lf", factory)
        assert namespace.debug.tools.lf is factory

    def test_bind_existing_intermediate(self):
        namespace = {"debug": {}}
        bind_factory(namespace, "debug.lf", "factory")
        assert namespace["debug"]["lf"] == "factory"

    def test_empty_context(self):
        with pytest.raises(ValueError):
            bind_factory({}, "", object())

    def test_unbind(self):
        namespace = types.SimpleNamespace()
        bind_factory(namespace, "a.lf", "factory")
        unbind_factory(namespace, "a.lf")
        assert not hasattr(namespace.a, "lf")
        unbind_factory(namespace, "missing.lf")
