"""
Lookup Tables Core Module

The Table class together with its interpolation styles, construction
validation and configuration options.
"""

from .styles import InterpolationStyle, MINIMUM_POINTS
from .config import TableOptions
from .table import Table

__all__ = [
    'Table',
    'TableOptions',
    'InterpolationStyle',
    'MINIMUM_POINTS',
]
