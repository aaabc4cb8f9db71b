"""
Lookup Tables Visualization

Plots one-dimensional slices of lookup tables: the knots of the outermost
dimension together with the curve the configured interpolation style draws
through them, including the extrapolated margins.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Tuple
import logging

from ..core.styles import InterpolationStyle
from ..core.table import Table
from ..exceptions import VisualizationError

logger = logging.getLogger(__name__)

STYLE_COLORS = {
    InterpolationStyle.LINEAR: 'tab:blue',
    InterpolationStyle.LAGRANGE2: 'tab:orange',
    InterpolationStyle.LAGRANGE3: 'tab:green',
    InterpolationStyle.CUBIC: 'tab:red',
    InterpolationStyle.CATMULL: 'tab:purple',
}

def slice_knots(table: Table, *fixed: float) -> Tuple[np.ndarray, np.ndarray]:
    """Knot coordinates of the outer dimension and the values seen through fixed

    Args:
        table: Table to slice
        *fixed: Coordinates for every dimension after the first

    Returns:
        Tuple of (x, y) arrays
    """
    x = np.asarray(table.independents, dtype=float)
    if table.is_nested:
        y = np.array([sub_table.read(*fixed) for sub_table in table.dependents], dtype=float)
    else:
        if fixed:
            raise VisualizationError(
                f"univariate table takes no fixed coordinates, got {len(fixed)}",
                plot_type="slice"
            )
        y = np.asarray(table.dependents, dtype=float)
    return x, y

def sample_slice(table: Table, *fixed: float, num_points: int = 200,
                 margin: float = 0.1) -> Tuple[np.ndarray, np.ndarray]:
    """Sample the outer dimension of a table on an even grid

    Args:
        table: Table to sample
        *fixed: Coordinates for every dimension after the first
        num_points: Number of samples
        margin: Fraction of the coordinate span added on each side

    Returns:
        Tuple of (x, y) arrays
    """
    if num_points < 2:
        raise VisualizationError(f"num_points must be at least 2, got {num_points}",
                                 plot_type="slice")
    if margin < 0:
        raise VisualizationError(f"margin must be non-negative, got {margin}",
                                 plot_type="slice")

    lo, hi = table.independents[0], table.independents[-1]
    pad = (hi - lo) * margin
    x = np.linspace(lo - pad, hi + pad, num_points)
    y = np.array([table.read(xi, *fixed) for xi in x])
    return x, y

def plot_table(table: Table, *fixed: float, ax: Optional[plt.Axes] = None,
               num_points: int = 200, margin: float = 0.1,
               save_path: Optional[str] = None) -> plt.Figure:
    """Plot the outer-dimension slice of a table with its knots

    Args:
        table: Table to plot
        *fixed: Coordinates for every dimension after the first
        ax: Axes to draw on; a new figure is created if None
        num_points: Number of samples along the curve
        margin: Fraction of the coordinate span shown beyond each end
        save_path: Optional path to save the figure

    Returns:
        Matplotlib figure object
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    style = InterpolationStyle.parse(table.style)
    x_dense, y_dense = sample_slice(table, *fixed, num_points=num_points, margin=margin)
    x_knots, y_knots = slice_knots(table, *fixed)

    ax.plot(x_dense, y_dense, '-', color=STYLE_COLORS[style], linewidth=2,
            label=style.name.title())
    ax.plot(x_knots, y_knots, 'ko', markersize=5, label='Knots')
    _decorate(ax, table, fixed)

    if save_path:
        fig.savefig(save_path, bbox_inches='tight')
        logger.info(f"Table plot saved to {save_path}")

    return fig

def plot_style_comparison(table: Table, *fixed: float, ax: Optional[plt.Axes] = None,
                          num_points: int = 200, margin: float = 0.1,
                          save_path: Optional[str] = None) -> plt.Figure:
    """Overlay the curves of every style the table has enough points for

    The table's own style is restored afterwards.

    Returns:
        Matplotlib figure object
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    original_style = table.style
    try:
        for style in InterpolationStyle:
            if len(table) < style.minimum_points:
                logger.debug(f"Skipping {style.name}: needs {style.minimum_points} points")
                continue
            table.style = style
            x_dense, y_dense = sample_slice(table, *fixed, num_points=num_points, margin=margin)
            ax.plot(x_dense, y_dense, '-', color=STYLE_COLORS[style], linewidth=1.5,
                    alpha=0.8, label=style.name.title())
    finally:
        table.style = original_style

    x_knots, y_knots = slice_knots(table, *fixed)
    ax.plot(x_knots, y_knots, 'ko', markersize=5, label='Knots')
    _decorate(ax, table, fixed)
    ax.set_title('Interpolation Style Comparison')

    if save_path:
        fig.savefig(save_path, bbox_inches='tight')
        logger.info(f"Style comparison saved to {save_path}")

    return fig

def _decorate(ax, table: Table, fixed):
    ax.set_xlabel('Independent')
    ax.set_ylabel('Dependent')
    if fixed:
        ax.set_title(f"Table slice at {', '.join(f'{v:g}' for v in fixed)}")
    else:
        ax.set_title('Table')
    if not table.extrapolate:
        for bound in (table.independents[0], table.independents[-1]):
            ax.axvline(bound, color='gray', linestyle=':', alpha=0.7)
    ax.legend()
    ax.grid(True, alpha=0.3)
