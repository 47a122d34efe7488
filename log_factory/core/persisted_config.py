"""
Persisted factory configuration record
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

# storage key of the factory configuration
CONFIG_STORAGE_KEY = "loggerfactory"

# key of the root level inside the stored levels
ROOT_KEY = "__root"


@dataclass
class PersistedConfig:
    """
    Durable representation of the factory state.

    ``levels`` maps logger names (and ``__root``) to level names,
    ``appenders`` lists the active appender keys in order.
    """

    levels: Dict[str, Any] = field(default_factory=dict)
    appenders: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "levels": dict(self.levels),
            "appenders": list(self.appenders),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "PersistedConfig":
        """
        Create record from dictionary.

        Fields that are missing or have the wrong shape come back empty.
        Values are not validated here.

        Args:
            data: Parsed JSON value

        Returns:
            New PersistedConfig instance

        Raises:
            ValueError: If data is not a dictionary
        """
        if not isinstance(data, dict):
            raise ValueError("persisted config must be a JSON object")

        levels = data.get("levels")
        appenders = data.get("appenders")
        return cls(
            levels=dict(levels) if isinstance(levels, dict) else {},
            appenders=list(appenders) if isinstance(appenders, list) else [],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "PersistedConfig":
        """
        Parse a record.

        Raises:
            ValueError: If text is not valid JSON or not a JSON object
        """
        try:
            data = json.loads(text)
        except (TypeError, RecursionError) as e:
            raise ValueError(str(e)) from e
        return cls.from_dict(data)
