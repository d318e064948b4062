"""Payoff curve over a range of environment capacities."""

from typing import Optional, Sequence, Tuple, TYPE_CHECKING
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from ..allocators import Allocator


def capacity_grid(capacity_range: Tuple[float, float], n_points: int = 50) -> np.ndarray:
    """Evenly spaced capacities over a (min, max) range."""
    if n_points < 1:
        raise ValueError(f"n_points must be >= 1, got {n_points}")
    low, high = capacity_range
    if low < 0 or high < low:
        raise ValueError(f"Invalid capacity range: {capacity_range}")
    return np.linspace(low, high, n_points)


def compute_capacity_curve(
    allocator: 'Allocator',
    capacities: Sequence[float],
) -> pd.DataFrame:
    """Re-solve an allocator at each capacity.

    The allocator's own capacity is restored afterwards and it is solved
    once more, so item solution fields match the original capacity.

    Args:
        allocator: Populated allocator (continuous or binary)
        capacities: Capacities to evaluate

    Returns:
        DataFrame with columns:
        - capacity: capacity as stored by the allocator (binary floors it)
        - payoff: total payoff of the solution
        - solution_capacity: capacity consumed by the solution
        - n_selected: number of items in the solution
    """
    capacities = list(capacities)
    if len(capacities) == 0:
        raise ValueError("Must provide at least one capacity")

    original = allocator.capacity

    rows = []
    try:
        for capacity in capacities:
            if not allocator.set_capacity(capacity):
                raise ValueError(f"Invalid capacity: {capacity!r}")
            selected = allocator.allocate()
            rows.append({
                'capacity': allocator.capacity,
                'payoff': allocator.payoff,
                'solution_capacity': allocator.solution_capacity,
                'n_selected': len(selected),
            })
    finally:
        allocator.set_capacity(original)
        allocator.allocate()

    return pd.DataFrame(rows)


def plot_capacity_curve(
    allocator: 'Allocator',
    capacity_range: Tuple[float, float],
    n_points: int = 50,
    ax: Optional[plt.Axes] = None,
    figsize: tuple = (10, 6),
    xlabel: str = 'Capacity',
    ylabel: str = 'Payoff',
    color: str = '#2E86AB',
    linestyle: str = '-',
    label: Optional[str] = None,
) -> plt.Axes:
    """Plot total payoff vs environment capacity.

    Args:
        allocator: Populated allocator to sweep
        capacity_range: (min, max) range for capacity
        n_points: Number of points to evaluate
        ax: Matplotlib axes (creates new if None)
        figsize: Figure size if creating new axes
        xlabel: X-axis label
        ylabel: Y-axis label
        color: Line color
        linestyle: Line style
        label: Legend label (defaults to the allocator class name)

    Returns:
        Matplotlib axes with the plot
    """
    created_fig = False
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
        created_fig = True

    df = compute_capacity_curve(allocator, capacity_grid(capacity_range, n_points))

    ax.plot(
        df['capacity'], df['payoff'],
        linewidth=3, color=color, linestyle=linestyle,
        label=label if label else allocator.__class__.__name__,
    )

    ax.set_xlim(capacity_range[0], capacity_range[1])
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.grid(alpha=0.3)

    if created_fig:
        plt.tight_layout()

    return ax
