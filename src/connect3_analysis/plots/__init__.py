from .chart import (
    plot_histograms,
    plot_results_stack,
    plot_scatter,
    plot_top_bar,
)

__all__ = [
    "plot_histograms",
    "plot_results_stack",
    "plot_scatter",
    "plot_top_bar",
]
