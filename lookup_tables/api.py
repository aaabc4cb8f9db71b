"""
Lookup Tables High-Level API

Convenience functions for building whole table trees from nested mappings,
configuring every level at once and evaluating many query points in one call.
"""

import logging
import numbers
from collections.abc import Mapping
from typing import Any, Iterator, Optional, Tuple

import numpy as np

from .core.config import TableOptions
from .core.table import Table
from .exceptions import ArityError, ConstructionError

logger = logging.getLogger(__name__)

def build_table(data: Any, options: Optional[TableOptions] = None) -> Table:
    """
    Build a table tree from nested mappings

    Every mapping becomes a table level whose keys are the independents.
    Values may be numbers, Tables, further mappings, or
    (independents, dependents) tuples.

    Args:
        data: Mapping or (independents, dependents) tuple for the outer level
        options: Options applied to every table created here; Tables passed
            in ready-made keep their own settings

    Returns:
        The outermost Table

    Example:
        >>> t = build_table({1.0: {1.0: 4.0, 2.0: 5.0},
        ...                  2.0: {1.0: 6.0, 3.0: 8.0}})
        >>> t.read(1.5, 2.0)
        6.0
    """
    if isinstance(data, Table):
        return data

    if isinstance(data, Mapping):
        table = Table({key: _build_value(value, options) for key, value in data.items()},
                      options=options)
    elif _is_pair(data):
        independents, dependents = data
        table = Table(independents, [_build_value(value, options) for value in dependents],
                      options=options)
    else:
        raise ConstructionError(
            f"cannot build a table from {type(data).__name__}, "
            f"expected a mapping or an (independents, dependents) tuple"
        )

    logger.debug(f"Built table tree {table!r}")
    return table

def configure(table: Table, style: Any = None, extrapolate: Optional[bool] = None,
              recursive: bool = False) -> Table:
    """
    Set the style and/or extrapolate flag of a table

    Args:
        table: Table to configure
        style: New interpolation style, left unchanged if None
        extrapolate: New extrapolate flag, left unchanged if None
        recursive: Also configure every sub-table

    Returns:
        The same table, for chaining
    """
    nodes = iter_tables(table) if recursive else [(0, table)]
    for _, node in nodes:
        if style is not None:
            node.style = style
        if extrapolate is not None:
            node.extrapolate = extrapolate
    return table

def iter_tables(table: Table, depth: int = 0) -> Iterator[Tuple[int, Table]]:
    """Walk a table tree depth-first, yielding (depth, table) pairs"""
    yield depth, table
    if table.is_nested:
        for sub_table in table.dependents:
            yield from iter_tables(sub_table, depth + 1)

def evaluate(table: Table, points: Any) -> np.ndarray:
    """
    Read a table at many points

    Args:
        table: Table to read
        points: Array of shape (m,) for a univariate table, or (m, d) with
            one row of d coordinates per query

    Returns:
        Array of m interpolated values
    """
    points = np.asarray(points, dtype=float)

    if points.ndim == 1:
        if table.dimensions != 1:
            raise ArityError(
                f"expected points of shape (m, {table.dimensions}), got {points.shape}",
                num_coordinates=1
            )
        points = points.reshape(-1, 1)
    elif points.ndim != 2:
        raise ArityError(f"expected a 1-D or 2-D array of points, got shape {points.shape}")

    values = np.empty(points.shape[0], dtype=float)
    for i, row in enumerate(points):
        values[i] = table.read(*row)

    return values

def _build_value(value: Any, options: Optional[TableOptions]) -> Any:
    if isinstance(value, numbers.Real) or isinstance(value, Table):
        return value
    return build_table(value, options)

def _is_pair(data: Any) -> bool:
    return isinstance(data, tuple) and len(data) == 2
