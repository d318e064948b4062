"""Solution read-back and what-if capacity analysis."""

from .summary import solution_frame
from .capacity_curve import capacity_grid, compute_capacity_curve, plot_capacity_curve

__all__ = [
    "solution_frame",
    "capacity_grid",
    "compute_capacity_curve",
    "plot_capacity_curve",
]
