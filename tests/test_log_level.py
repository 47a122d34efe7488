"""Tests for log levels and level normalization"""

import pytest

from log_factory import LogLevel, get_valid_level
from log_factory.core.log_level import LEVEL_FROM_NAME, LEVEL_NAMES, level_name


class TestLogLevel:
    """Test log level ordering and names."""

    def test_log_levels(self):
        assert LogLevel.OFF < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.TRACE

    def test_names_round_trip(self):
        for level in LogLevel:
            assert LEVEL_FROM_NAME[LEVEL_NAMES[level]] is level

    def test_str(self):
        assert str(LogLevel.WARN) == "WARN"

    def test_level_name(self):
        assert level_name(LogLevel.DEBUG) == "DEBUG"
        assert level_name(None) is None


class TestGetValidLevel:
    """Test normalization of heterogeneous level input."""

    @pytest.mark.parametrize(
        "name, code",
        [("ERROR", 1), ("WARN", 2), ("INFO", 3), ("DEBUG", 4), ("TRACE", 5)],
    )
    def test_name_and_code_agree(self, name, code):
        assert get_valid_level(name) == code
        assert get_valid_level(code) == code
        assert get_valid_level(LogLevel(code)) == code

    def test_off(self):
        assert get_valid_level("OFF") is LogLevel.OFF
        assert get_valid_level(0) is LogLevel.OFF

    def test_level_passes_through(self):
        assert get_valid_level(LogLevel.WARN) is LogLevel.WARN

    @pytest.mark.parametrize("value", ["bogus", 100, -1, "100", "3", "", None, 2.5, True, [], {}])
    def test_invalid(self, value):
        assert get_valid_level(value) is None

    def test_names_are_case_sensitive(self):
        assert get_valid_level("info") is None

    def test_integral_float(self):
        assert get_valid_level(3.0) is LogLevel.INFO

    def test_returns_enum_member(self):
        assert isinstance(get_valid_level(4), LogLevel)
        assert isinstance(get_valid_level("DEBUG"), LogLevel)
