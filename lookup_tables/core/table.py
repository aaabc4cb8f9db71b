"""
Lookup Tables Core Table

The Table class holds sorted independent coordinates and their dependent
values. A dependent may itself be a Table, so nesting tables builds a lookup
of any dimension: each level brackets its own coordinate, reduces the
remaining coordinates on the sub-tables at the bracket points, and combines
the results with a 1-D interpolation.

Style and extrapolate are local to each level and are not propagated to
sub-tables.
"""

import logging
import weakref
from collections import OrderedDict
from typing import Any, Callable, List, Optional, Tuple

from .config import TableOptions
from .styles import InterpolationStyle, coerce_style
from .validation import split_arguments, validate_dependents, validate_independents
from ..exceptions import ArityError, ConfigurationError, ConstructionError, InsufficientDataError
from ..utils.search import bracket
from ..utils.spline_interpolation import (
    catmull_rom, cubic_segment, lagrange2, lagrange3, linear, natural_second_derivatives
)

logger = logging.getLogger(__name__)

# Number of coordinate tails whose spline second derivatives are kept per table
SECOND_DERIVATIVE_CACHE_SIZE = 32

class Table:
    """
    Interpolating lookup table of arbitrary dimension

    Examples:
        >>> t = Table([1.0, 2.0], [3.0, 4.0])
        >>> t.read(1.5)
        3.5
        >>> t = Table({1.0: 3.0, 2.0: 4.0}, extrapolate=False)
        >>> t.read(0.0)
        3.0
        >>> t = Table([1.0, 2.0], [Table([1.0, 2.0], [3.0, 4.0]),
        ...                        Table([2.0, 3.0, 5.0], [6.0, -1.0, 7.0])])
        >>> t.read(2.0, 3.0)
        -1.0
    """

    LINEAR = InterpolationStyle.LINEAR
    LAGRANGE2 = InterpolationStyle.LAGRANGE2
    LAGRANGE3 = InterpolationStyle.LAGRANGE3
    CUBIC = InterpolationStyle.CUBIC
    CATMULL = InterpolationStyle.CATMULL

    def __init__(self, *args,
                 style: Any = None,
                 extrapolate: Optional[bool] = None,
                 options: Optional[TableOptions] = None,
                 configure: Optional[Callable[["Table"], Any]] = None):
        """Build a table from two parallel sequences or from one mapping

        Args:
            *args: (independents, dependents) or (mapping,). Dependents are
                either all numbers or all Tables.
            style: Interpolation style for this level
            extrapolate: Whether to extrapolate beyond the end points
            options: TableOptions applied before style/extrapolate
            configure: Called once with the new table before returning

        Raises:
            ConstructionError: if the arguments do not describe a valid table
            ConfigurationError: if extrapolate is not a boolean
        """
        independents, dependents = split_arguments(args)

        if len(independents) != len(dependents):
            raise ConstructionError(
                f"number of independents ({len(independents)}) must equal "
                f"the number of dependents ({len(dependents)})"
            )

        self._independents = validate_independents(independents)
        self._dependents, self._nested = validate_dependents(dependents, Table)

        self._extrapolate = True
        self._style = InterpolationStyle.LINEAR

        # index of the last bracket; successive reads tend to land near it
        self._ilast = 0
        self._secderivs = OrderedDict()
        self._parents = weakref.WeakSet()

        if self._nested:
            for sub_table in self._dependents:
                sub_table._parents.add(self)

        if options is not None:
            options.apply(self)
        if style is not None:
            self.style = style
        if extrapolate is not None:
            self.extrapolate = extrapolate
        if configure is not None:
            configure(self)

        logger.debug("Built %r", self)

    # Attributes

    @property
    def style(self):
        """Interpolation style of this level"""
        return self._style

    @style.setter
    def style(self, value):
        # unrecognised values are kept and rejected by the next read
        self._style = coerce_style(value)
        self._invalidate()

    @property
    def extrapolate(self) -> bool:
        """Whether reads beyond the end points extrapolate or clamp"""
        return self._extrapolate

    @extrapolate.setter
    def extrapolate(self, value: bool):
        if not isinstance(value, bool):
            raise ConfigurationError(
                "extrapolate must be a boolean",
                config_key="extrapolate",
                config_value=repr(value)
            )
        self._extrapolate = value
        self._invalidate()

    @property
    def independents(self) -> Tuple[float, ...]:
        return self._independents

    @property
    def dependents(self) -> Tuple[Any, ...]:
        return self._dependents

    @property
    def is_nested(self) -> bool:
        """True if the dependents are sub-tables"""
        return self._nested

    @property
    def dimensions(self) -> int:
        """Number of coordinates a read takes, following the first branch"""
        if self._nested:
            return 1 + self._dependents[0].dimensions
        return 1

    def __len__(self) -> int:
        return len(self._independents)

    # Lookup

    def read(self, *args: float) -> float:
        """Interpolate or extrapolate the table

        Pass one coordinate per dimension: one for a univariate table, two
        for a bivariate table and so on.

        Args:
            *args: Query coordinates, outermost dimension first

        Returns:
            Interpolated value

        Raises:
            UnknownStyleError: if the style is not one of the known styles
            InsufficientDataError: if the table has too few points for its style
            ArityError: if the number of coordinates does not match the depth
        """
        style = InterpolationStyle.parse(self._style)

        size = len(self._independents)
        if size < style.minimum_points:
            raise InsufficientDataError(
                f"table requires at least {style.minimum_points} points "
                f"for {style.name.lower()} interpolation",
                style=style.name,
                required_points=style.minimum_points,
                available_points=size
            )

        if len(args) < 1:
            raise ArityError("insufficient number of arguments to read table",
                             num_coordinates=0)
        if len(args) == 1 and self._nested:
            raise ArityError("insufficient number of arguments to read table",
                             num_coordinates=1)
        if len(args) > 1 and not self._nested:
            raise ArityError("too many arguments to read table",
                             num_coordinates=len(args))

        x = float(args[0])
        tail = tuple(args[1:])
        inds = self._independents

        if not self._extrapolate and x < inds[0]:
            return self._subread(0, tail)
        if not self._extrapolate and x > inds[-1]:
            return self._subread(size - 1, tail)

        self._ilast = ileft = bracket(inds, x, self._ilast)

        if style == InterpolationStyle.LINEAR:
            return linear(x, inds[ileft], inds[ileft + 1],
                          self._subread(ileft, tail), self._subread(ileft + 1, tail))

        elif style == InterpolationStyle.LAGRANGE2:
            indx = ileft
            if ileft == size - 2:
                indx = ileft - 1
            return lagrange2(x, inds[indx], inds[indx + 1], inds[indx + 2],
                             *self._subreads(range(indx, indx + 3), tail))

        elif style == InterpolationStyle.LAGRANGE3:
            indx = ileft
            if ileft > size - 3:
                indx = size - 3
            elif ileft == 0:
                indx = 1
            return lagrange3(x, inds[indx - 1], inds[indx], inds[indx + 1], inds[indx + 2],
                             *self._subreads(range(indx - 1, indx + 3), tail))

        elif style == InterpolationStyle.CUBIC:
            secderivs = self._second_derivatives(tail)
            return cubic_segment(x, inds[ileft], inds[ileft + 1],
                                 self._subread(ileft, tail), self._subread(ileft + 1, tail),
                                 secderivs[ileft], secderivs[ileft + 1])

        else:
            # the first and last points double as phantom control points
            i0 = max(ileft - 1, 0)
            i3 = min(ileft + 2, size - 1)
            indices = (i0, ileft, ileft + 1, i3)
            return catmull_rom(x, *(inds[i] for i in indices),
                               *self._subreads(indices, tail))

    interpolate = read
    __call__ = read

    def _subread(self, i: int, tail: Tuple[float, ...]) -> float:
        """Value at point i, reduced over the remaining coordinates"""
        if not tail:
            return self._dependents[i]
        return self._dependents[i].read(*tail)

    def _subreads(self, indices, tail: Tuple[float, ...]) -> List[float]:
        return [self._subread(i, tail) for i in indices]

    def _second_derivatives(self, tail: Tuple[float, ...]) -> List[float]:
        """Natural spline second derivatives for the values seen through tail"""
        secderivs = self._secderivs.get(tail)
        if secderivs is not None:
            self._secderivs.move_to_end(tail)
            return secderivs

        ys = self._subreads(range(len(self._independents)), tail)
        secderivs = natural_second_derivatives(self._independents, ys)

        self._secderivs[tail] = secderivs
        if len(self._secderivs) > SECOND_DERIVATIVE_CACHE_SIZE:
            self._secderivs.popitem(last=False)

        logger.debug(f"Cached spline second derivatives for tail {tail} "
                     f"({len(self._secderivs)} cached)")
        return secderivs

    def _invalidate(self):
        """Drop cached spline derivatives here and in every enclosing table"""
        self._secderivs.clear()
        for parent in list(self._parents):
            parent._invalidate()

    # Formatting

    def format(self, pattern: str = "%12.4f", indent: int = 0) -> str:
        """Human readable form of the table

        Args:
            pattern: %-style format applied to every number
            indent: Nesting depth of this table; each level adds three spaces

        Returns:
            Multi-line rendering without a trailing newline
        """
        indt = "   " * indent
        s = ""
        if self._nested:
            last = len(self._independents) - 1
            for i, ind in enumerate(self._independents):
                s += indt + pattern % ind + "\n"
                s += self._dependents[i].format(pattern, indent + 1)
                if i != last:
                    s += "\n"
        else:
            s += indt + "".join(pattern % ind for ind in self._independents)
            s += "\n"
            s += indt + "".join(pattern % dep for dep in self._dependents)
        return s

    def __str__(self):
        return self.format()

    def __repr__(self):
        style = getattr(self._style, 'name', self._style)
        return (f"Table(points={len(self._independents)}, dimensions={self.dimensions}, "
                f"style={style}, extrapolate={self._extrapolate})")
