from .chart import (
    plot_best_score,
    plot_score_heatmap,
)

__all__ = [
    "plot_best_score",
    "plot_score_heatmap",
]
