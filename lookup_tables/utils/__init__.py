"""
Lookup Tables Utilities Module

Bracket search and the one-dimensional interpolation kernels shared by
every table level.
"""

from .search import bracket

from .spline_interpolation import (
    linear, lagrange2, lagrange3, catmull_rom, cubic_segment,
    natural_second_derivatives
)

__all__ = [
    # Searching
    'bracket',

    # Interpolation kernels
    'linear',
    'lagrange2',
    'lagrange3',
    'catmull_rom',
    'cubic_segment',
    'natural_second_derivatives'
]
