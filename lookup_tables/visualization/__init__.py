"""
Lookup Tables Visualization Module

Matplotlib plots of table slices and interpolation style comparisons.
"""

from .table_plots import plot_table, plot_style_comparison, sample_slice, slice_knots

__all__ = [
    'plot_table',
    'plot_style_comparison',
    'sample_slice',
    'slice_knots',
]
