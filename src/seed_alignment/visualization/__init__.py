"""
Visualization modules for seed alignment summaries.
"""

from .summary_plot import (
    summary_score_matrix,
    plot_summary_heatmap
)

__all__ = [
    'summary_score_matrix',
    'plot_summary_heatmap',
]
