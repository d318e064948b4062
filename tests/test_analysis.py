"""Tests for solution read-back and capacity sweeps."""
import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from allockit import AllocatableItem, BinaryAllocator, ContinuousAllocator
from allockit.analysis import (
    capacity_grid,
    compute_capacity_curve,
    plot_capacity_curve,
    solution_frame,
)


def _populate(allocation, pairs, capacity):
    items = [AllocatableItem(capacity=c, payoff=p, name=f"item{i}")
             for i, (c, p) in enumerate(pairs, start=1)]
    for item in items:
        allocation.add_item(item)
    allocation.capacity = capacity
    return items


class TestSolutionFrame:
    """Tests for the per-item solution table."""

    def test_columns_and_values(self):
        allocation = ContinuousAllocator()
        _populate(allocation, [(5, 100), (8, 150)], 8)
        df = solution_frame(allocation.allocate())

        assert list(df.columns) == [
            'name', 'id', 'capacity', 'payoff',
            'solution_capacity', 'solution_value', 'fraction',
        ]
        assert list(df['name']) == ['item1', 'item2']
        np.testing.assert_array_almost_equal(df['fraction'], [1.0, 0.375])
        assert df['solution_value'].sum() == 156.25

    def test_zero_capacity_fraction_is_nan(self):
        df = solution_frame([AllocatableItem(payoff=3)])
        assert np.isnan(df['fraction'].iloc[0])

    def test_empty(self):
        df = solution_frame([])
        assert df.empty
        assert 'solution_value' in df.columns


class TestCapacityCurve:
    """Tests for re-solving across capacities."""

    def test_capacity_grid(self):
        np.testing.assert_array_equal(capacity_grid((0, 10), 3), [0, 5, 10])

    def test_capacity_grid_invalid(self):
        with pytest.raises(ValueError):
            capacity_grid((5, 1))
        with pytest.raises(ValueError):
            capacity_grid((0, 1), n_points=0)

    def test_continuous_curve(self):
        allocation = ContinuousAllocator()
        _populate(allocation, [(5, 100), (8, 150)], 8)

        df = compute_capacity_curve(allocation, [0, 4, 8, 20])

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ['capacity', 'payoff', 'solution_capacity', 'n_selected']
        np.testing.assert_array_almost_equal(df['payoff'], [0, 80, 156.25, 250])
        assert list(df['n_selected']) == [0, 1, 2, 2]

    def test_restores_original_capacity(self):
        """The allocator ends at its original capacity and solution."""
        allocation = ContinuousAllocator()
        items = _populate(allocation, [(5, 100), (8, 150)], 8)

        compute_capacity_curve(allocation, [1, 20])

        assert allocation.capacity == 8
        assert allocation.payoff == 156.25
        assert items[1].solution_capacity == 3

    def test_binary_curve_is_non_decreasing(self):
        allocation = BinaryAllocator()
        _populate(allocation, [(5, 10), (4, 40), (6, 30), (3, 50)], 10)

        df = compute_capacity_curve(allocation, range(0, 19))

        assert df['payoff'].iloc[10] == 90
        assert np.all(np.diff(df['payoff']) >= 0)
        assert df['payoff'].iloc[-1] == 130

    def test_binary_curve_floors_capacity(self):
        allocation = BinaryAllocator()
        _populate(allocation, [(3, 50), (4, 40)], 7)
        df = compute_capacity_curve(allocation, [3.7])
        assert df['capacity'].iloc[0] == 3
        assert df['payoff'].iloc[0] == 50

    def test_invalid_capacity(self):
        allocation = ContinuousAllocator()
        _populate(allocation, [(5, 100)], 8)
        with pytest.raises(ValueError):
            compute_capacity_curve(allocation, [1, -2])
        assert allocation.capacity == 8

    def test_empty_capacities(self):
        with pytest.raises(ValueError):
            compute_capacity_curve(ContinuousAllocator(), [])

    def test_plot_returns_axes(self):
        allocation = ContinuousAllocator()
        _populate(allocation, [(5, 100), (8, 150)], 8)

        ax = plot_capacity_curve(allocation, (0, 20), n_points=5)

        assert isinstance(ax, plt.Axes)
        assert ax.get_lines()[0].get_label() == 'ContinuousAllocator'
        plt.close('all')

    def test_plot_on_existing_axes(self):
        allocation = BinaryAllocator()
        _populate(allocation, [(2, 3), (3, 4)], 5)
        fig, ax = plt.subplots()

        result = plot_capacity_curve(allocation, (0, 5), n_points=6, ax=ax, label='0-1')

        assert result is ax
        assert ax.get_lines()[0].get_label() == '0-1'
        plt.close(fig)
