"""Dense 2-D numeric tables."""

import numpy as np


def create_table(rows: int, cols: int, fill: float = 0.0) -> np.ndarray:
    """Build a rows x cols table pre-filled with a scalar.

    Args:
        rows: Number of rows (>= 0)
        cols: Number of columns (>= 0)
        fill: Value placed in every cell

    Returns:
        Array of shape (rows, cols)
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"Table dimensions must be non-negative, got ({rows}, {cols})")
    return np.full((int(rows), int(cols)), fill, dtype=float)
