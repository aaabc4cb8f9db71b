"""
Lookup Tables Construction Validation

Normalises the positional arguments a table is built from and checks the
structural invariants every table level relies on: matching lengths, at
least two points, finite strictly increasing coordinates and homogeneous
dependents.
"""

import numbers
from collections.abc import Mapping, Sequence
from typing import Any, Tuple

import numpy as np

from ..exceptions import ConstructionError

MIN_POINTS = 2


def split_arguments(args: Tuple[Any, ...]) -> Tuple[Any, Any]:
    """Turn constructor arguments into parallel independent/dependent sequences

    Args:
        args: Either (independents, dependents) or (mapping,)

    Returns:
        Tuple of (independents, dependents) as lists
    """
    if len(args) == 2:
        independents, dependents = args
        if not _is_sequence(independents) or not _is_sequence(dependents):
            raise ConstructionError(
                "two argument constructor requires two sequences", num_arguments=2
            )
        return list(independents), list(dependents)

    if len(args) == 1:
        mapping = args[0]
        if not isinstance(mapping, Mapping):
            raise ConstructionError(
                "single argument constructor requires a mapping", num_arguments=1
            )
        try:
            items = sorted(mapping.items(), key=lambda item: item[0])
        except TypeError as e:
            raise ConstructionError(f"mapping keys cannot be ordered: {e}") from e
        return [key for key, _ in items], [value for _, value in items]

    raise ConstructionError("expected (independents, dependents) or (mapping)",
                            num_arguments=len(args))


def validate_independents(independents) -> Tuple[float, ...]:
    """Check that coordinates are finite and strictly increasing

    Returns:
        The coordinates as a tuple of floats
    """
    if len(independents) < MIN_POINTS:
        raise ConstructionError(
            f"at least {MIN_POINTS} points are required, got {len(independents)}"
        )

    for value in independents:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ConstructionError(f"independent values must be real numbers, got {value!r}")

    coords = np.asarray(independents, dtype=float)

    if not np.all(np.isfinite(coords)):
        raise ConstructionError("independent values must be finite")
    if not np.all(np.diff(coords) > 0):
        raise ConstructionError("independents must be monotonically increasing")

    return tuple(float(x) for x in coords)


def validate_dependents(dependents, table_type: type) -> Tuple[Tuple[Any, ...], bool]:
    """Check that dependents are all numbers or all tables

    Args:
        dependents: Dependent values for one table level
        table_type: The table class nested levels must be instances of

    Returns:
        Tuple of (dependents, nested) where scalars have been converted to
        float and nested tells whether the level holds sub-tables
    """
    nested = isinstance(dependents[0], table_type)

    values = []
    for value in dependents:
        if nested:
            if not isinstance(value, table_type):
                raise ConstructionError("dependents cannot mix numbers and tables")
            values.append(value)
        elif isinstance(value, table_type):
            raise ConstructionError("dependents cannot mix numbers and tables")
        elif isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ConstructionError(
                f"dependent values must be real numbers or tables, got {value!r}"
            )
        else:
            values.append(float(value))

    return tuple(values), nested


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Sequence, np.ndarray))
