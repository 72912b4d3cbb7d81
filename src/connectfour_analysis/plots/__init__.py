from .chart import (
    plot_histograms,
    plot_nodes_by_depth,
    plot_strength_by_depth,
    plot_time_by_ply,
)

__all__ = [
    "plot_histograms",
    "plot_nodes_by_depth",
    "plot_strength_by_depth",
    "plot_time_by_ply",
]
