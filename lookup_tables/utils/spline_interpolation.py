"""
Spline Interpolation Utilities

One-dimensional interpolation kernels used by every table level: linear,
3- and 4-point Lagrange polynomials, the natural cubic spline (segment
formula and second-derivative solver) and the Catmull-Rom Hermite spline.

The kernels work on plain floats. Tables hand them the coordinates and the
already reduced dependent values of the points they selected, so the same
kernels serve tables of any dimension.
"""

import logging
from typing import List, Sequence

import numpy as np
from scipy.interpolate import CubicSpline

logger = logging.getLogger(__name__)

def linear(x: float, x1: float, x2: float, y1: float, y2: float) -> float:
    """Straight line through (x1, y1) and (x2, y2), evaluated at x"""
    return (y2 - y1) / (x2 - x1) * (x - x1) + y1

def lagrange2(x: float, x1: float, x2: float, x3: float,
              y1: float, y2: float, y3: float) -> float:
    """Quadratic Lagrange polynomial through three points, evaluated at x"""
    c12 = x1 - x2
    c13 = x1 - x3
    c23 = x2 - x3
    q1 = y1 / (c12 * c13)
    q2 = y2 / (c12 * c23)
    q3 = y3 / (c13 * c23)
    xx1 = x - x1
    xx2 = x - x2
    xx3 = x - x3
    return xx3 * (q1 * xx2 - q2 * xx1) + q3 * xx1 * xx2

def lagrange3(x: float, x1: float, x2: float, x3: float, x4: float,
              y1: float, y2: float, y3: float, y4: float) -> float:
    """Cubic Lagrange polynomial through four points, evaluated at x"""
    c12 = x1 - x2
    c13 = x1 - x3
    c14 = x1 - x4
    c23 = x2 - x3
    c24 = x2 - x4
    c34 = x3 - x4
    q1 = y1 / (c12 * c13 * c14)
    q2 = y2 / (c12 * c23 * c24)
    q3 = y3 / (c13 * c23 * c34)
    q4 = y4 / (c14 * c24 * c34)
    xx1 = x - x1
    xx2 = x - x2
    xx3 = x - x3
    xx4 = x - x4
    return xx4 * (xx3 * (q1 * xx2 - q2 * xx1) + q3 * xx1 * xx2) - q4 * xx1 * xx2 * xx3

def catmull_rom(x: float, x0: float, x1: float, x2: float, x3: float,
                y0: float, y1: float, y2: float, y3: float) -> float:
    """
    Cubic Hermite segment between (x1, y1) and (x2, y2) with Catmull-Rom tangents

    The tangent at each end of the segment is the slope of the chord
    through its neighbours, so x0/x3 may repeat x1/x2 at the ends of a table.

    Args:
        x: Evaluation point (may lie outside [x1, x2])
        x0, x1, x2, x3: Coordinates of the four control points
        y0, y1, y2, y3: Values at the control points

    Returns:
        Spline value at x
    """
    m0 = (y2 - y0) / (x2 - x0)
    m1 = (y3 - y1) / (x3 - x1)
    h = x2 - x1
    t = (x - x1) / h

    h00 = 2.0 * t**3 - 3.0 * t**2 + 1.0
    h10 = t**3 - 2.0 * t**2 + t
    h01 = -2.0 * t**3 + 3.0 * t**2
    h11 = t**3 - t**2

    return h00 * y1 + h10 * h * m0 + h01 * y2 + h11 * h * m1

def cubic_segment(x: float, x1: float, x2: float, y1: float, y2: float,
                  d1: float, d2: float) -> float:
    """
    Evaluate one cubic spline segment from its end values and second derivatives

    Args:
        x: Evaluation point
        x1, x2: Segment end coordinates
        y1, y2: Values at the segment ends
        d1, d2: Second derivatives at the segment ends

    Returns:
        Spline value at x
    """
    step = x2 - x1
    a = (x2 - x) / step
    b = (x - x1) / step
    return a * y1 + b * y2 + ((a * a * a - a) * d1 + (b * b * b - b) * d2) * (step * step) / 6.0

def natural_second_derivatives(xs: Sequence[float], ys: Sequence[float]) -> List[float]:
    """
    Second derivatives of the natural cubic spline through (xs, ys)

    Both end second derivatives are zero.

    Args:
        xs: Strictly increasing knot coordinates (at least 3)
        ys: Values at the knots

    Returns:
        Second derivative at every knot
    """
    n = len(xs)
    logger.debug(f"Solving natural spline second derivatives for {n} knots")

    x_knots = np.asarray(xs, dtype=float)
    spline = CubicSpline(x_knots, np.asarray(ys, dtype=float), bc_type='natural')
    secder = [float(d) for d in spline(x_knots, 2)]

    # natural spline has 0 second derivative at the ends
    secder[0] = 0.0
    secder[-1] = 0.0
    return secder
