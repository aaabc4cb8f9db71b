"""
Lookup Tables Configuration

Options controlling how a table level interpolates, gathered in a dataclass
so the same settings can be applied to many tables or read from a plain
dictionary.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict

from .styles import InterpolationStyle
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

@dataclass
class TableOptions:
    """Per-level interpolation options"""
    style: InterpolationStyle = InterpolationStyle.LINEAR
    extrapolate: bool = True

    def __post_init__(self):
        self.style = InterpolationStyle.parse(self.style)
        if not isinstance(self.extrapolate, bool):
            raise ConfigurationError(
                "extrapolate must be a boolean",
                config_key="extrapolate",
                config_value=repr(self.extrapolate)
            )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "TableOptions":
        """Build options from a dictionary such as {'style': 'cubic', 'extrapolate': False}

        Args:
            config: Mapping of option names to values

        Returns:
            TableOptions instance
        """
        known = {f.name for f in fields(cls)}
        for key in config:
            if key not in known:
                raise ConfigurationError(
                    f"unknown table option, expected one of {sorted(known)}",
                    config_key=str(key)
                )
        return cls(**config)

    def to_dict(self) -> Dict[str, Any]:
        return {'style': self.style.name.lower(), 'extrapolate': self.extrapolate}

    def apply(self, table, recursive: bool = False):
        """Set these options on a table, and on every sub-table if recursive

        Returns:
            The table, for chaining
        """
        table.style = self.style
        table.extrapolate = self.extrapolate

        if recursive and table.is_nested:
            for sub_table in table.dependents:
                self.apply(sub_table, recursive=True)

        logger.debug(f"Applied {self} to table with {len(table)} points (recursive={recursive})")
        return table
