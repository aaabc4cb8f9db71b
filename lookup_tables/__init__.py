"""Interpolating lookup tables of any dimension."""
__version__="1.0.0"

from .core.styles import InterpolationStyle
from .core.config import TableOptions
from .core.table import Table
from .api import build_table, configure, evaluate, iter_tables
from .exceptions import (
    LookupTablesError,
    ConstructionError,
    InsufficientDataError,
    ArityError,
    UnknownStyleError,
    ConfigurationError,
)

LINEAR = InterpolationStyle.LINEAR
LAGRANGE2 = InterpolationStyle.LAGRANGE2
LAGRANGE3 = InterpolationStyle.LAGRANGE3
CUBIC = InterpolationStyle.CUBIC
CATMULL = InterpolationStyle.CATMULL
