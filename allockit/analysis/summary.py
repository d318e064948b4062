"""Tabular read-back of solved items."""

from typing import Iterable, TYPE_CHECKING
import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from ..item import AllocatableItem


def solution_frame(items: Iterable['AllocatableItem']) -> pd.DataFrame:
    """Collect item definitions and solution fields into a DataFrame.

    Args:
        items: Items, typically the sequence returned by allocate()

    Returns:
        DataFrame with one row per item, in the given order, and columns:
        - name, id
        - capacity, payoff
        - solution_capacity, solution_value
        - fraction: solution_capacity / capacity (NaN for zero capacity)
    """
    rows = []
    for item in items:
        rows.append({
            'name': item.name,
            'id': item.id,
            'capacity': item.capacity,
            'payoff': item.payoff,
            'solution_capacity': item.solution_capacity,
            'solution_value': item.solution_value,
            'fraction': item.solution_capacity / item.capacity if item.capacity else np.nan,
        })

    columns = [
        'name', 'id', 'capacity', 'payoff',
        'solution_capacity', 'solution_value', 'fraction',
    ]
    return pd.DataFrame(rows, columns=columns)
