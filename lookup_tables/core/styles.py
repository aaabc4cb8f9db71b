"""
Lookup Tables Interpolation Styles

The interpolation styles a table can be configured with, and the minimum
number of points each one needs.
"""

from enum import IntEnum
from typing import Any, Dict

from ..exceptions import UnknownStyleError


class InterpolationStyle(IntEnum):
    """Interpolation/extrapolation algorithm used by a single table level"""

    LINEAR = 1
    LAGRANGE2 = 2
    LAGRANGE3 = 3
    CUBIC = 4      # natural cubic spline
    CATMULL = 5    # Catmull-Rom spline

    @property
    def minimum_points(self) -> int:
        return MINIMUM_POINTS[self]

    @classmethod
    def parse(cls, value: Any) -> "InterpolationStyle":
        """Convert a member, its integer value or its name to a style

        Args:
            value: Style member, integer constant or case-insensitive name

        Returns:
            The matching InterpolationStyle

        Raises:
            UnknownStyleError: if the value names none of the styles
        """
        style = coerce_style(value)
        if not isinstance(style, cls):
            raise UnknownStyleError(
                f"expected one of {', '.join(s.name for s in cls)}",
                style=value
            )
        return style


MINIMUM_POINTS: Dict[InterpolationStyle, int] = {
    InterpolationStyle.LINEAR: 2,
    InterpolationStyle.LAGRANGE2: 3,
    InterpolationStyle.LAGRANGE3: 4,
    InterpolationStyle.CUBIC: 3,
    InterpolationStyle.CATMULL: 2,
}


def coerce_style(value: Any) -> Any:
    """Return the style matching value, or value unchanged if none matches"""
    if isinstance(value, InterpolationStyle):
        return value
    if isinstance(value, str):
        return InterpolationStyle.__members__.get(value.strip().upper(), value)
    if isinstance(value, bool):
        return value
    try:
        return InterpolationStyle(value)
    except (ValueError, TypeError):
        return value
