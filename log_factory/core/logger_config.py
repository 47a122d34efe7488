"""
Logger factory configuration
"""

from dataclasses import dataclass
from typing import Optional, Union

from log_factory.core.log_level import LogLevel, get_valid_level

# attribute the factory is exposed under by default
DEFAULT_CONSOLE_CONTEXT = "lf"


@dataclass
class LoggerFactoryConfig:
    """
    Options accepted by LoggerFactory.init.

    The console appender is always activated at boot, whatever this holds.
    """

    # Root level adopted before the stored configuration is restored
    root_level: Optional[Union[LogLevel, str, int]] = None

    # Console settings
    console_feature: bool = False
    console_context: str = DEFAULT_CONSOLE_CONTEXT

    # Bootstrap settings
    suppress_bootstrap_logging: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.console_context, str) or not self.console_context:
            raise ValueError("console_context must be a non-empty string")

    @property
    def valid_root_level(self) -> Optional[LogLevel]:
        """The normalized root level, None if unset or invalid."""
        return get_valid_level(self.root_level)

    @classmethod
    def default(cls) -> "LoggerFactoryConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def console_config(cls, context: str = DEFAULT_CONSOLE_CONTEXT) -> "LoggerFactoryConfig":
        """Create configuration exposing the factory for interactive use."""
        return cls(console_feature=True, console_context=context)

    @classmethod
    def quiet_config(cls) -> "LoggerFactoryConfig":
        """Create configuration without bootstrap messages."""
        return cls(suppress_bootstrap_logging=True)
