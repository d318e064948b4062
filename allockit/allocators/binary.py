"""0-1 knapsack allocation."""

import logging
import math
from typing import List

import numpy as np

from .base import Allocator
from ..item import AllocatableItem
from ..table import create_table

logger = logging.getLogger(__name__)


class BinaryAllocator(Allocator):
    """Allocator where each item is either fully included or excluded.

    Solves the 0-1 knapsack problem by dynamic programming over a value
    table with one row per item (plus a zero-item row) and one column per
    integer capacity budget (plus a zero-capacity column). The selected
    items are recovered by backtracking from the bottom-right cell.

    Capacity is floored to an integer on assignment. Item capacities must
    already be non-negative integers; they are not rounded or validated
    here.

    There is no transform strategy. For what-if analysis, change item
    capacity/payoff directly between solves.
    """

    def _normalize_capacity(self, value):
        return int(math.floor(value))

    def build_value_table(self) -> np.ndarray:
        """Build the dynamic-programming value table for the current items.

        Cell (i, c) holds the best payoff achievable with the first i items
        and a capacity budget of c. Row 0 and column 0 stay 0.

        Returns:
            Array of shape (item_count + 1, capacity + 1)
        """
        rows = len(self._items) + 1
        cols = self._capacity + 1
        value = create_table(rows, cols, 0.0)

        for i in range(1, rows):
            item = self._items[i - 1]
            weight = int(item.capacity)
            prev = value[i - 1]

            # item does not fit: inherit the previous row
            value[i] = prev

            budgets = np.arange(max(weight, 1), cols)
            if budgets.size:
                value[i, budgets] = np.maximum(
                    item.payoff + prev[budgets - weight],
                    prev[budgets],
                )

        return value

    def allocate(self) -> List[AllocatableItem]:
        """Solve the 0-1 knapsack problem.

        Every call rebuilds the value table from the current items and
        capacity.

        Returns:
            Selected items in backtracking order, i.e. from the last
            inserted selected item to the first.
        """
        self._reset_solution()
        allocation: List[AllocatableItem] = []
        n_items = len(self._items)

        if n_items == 0 or self._capacity == 0:
            logger.debug("Nothing to allocate: %d items, capacity %s", n_items, self._capacity)
            return allocation

        logger.debug("Allocating %d items into capacity %s", n_items, self._capacity)

        if n_items == 1:
            item = self._items[0]
            if item.capacity <= self._capacity:
                self._select(item, allocation)
                self._solution_payoff = item.payoff
            return allocation

        value = self.build_value_table()
        row, col = n_items, self._capacity
        self._solution_payoff = float(value[row, col])

        current = self._solution_payoff
        while current > 0:
            # included if the value did not come from the previous sub-problem
            if value[row - 1, col] != current:
                item = self._items[row - 1]
                self._select(item, allocation)
                col -= int(item.capacity)
            row -= 1
            current = value[row, col]

        logger.debug(
            "Allocated %d items, payoff %s, capacity used %s",
            len(allocation), self._solution_payoff, self._solution_capacity,
        )
        return allocation

    def _select(self, item: AllocatableItem, allocation: List[AllocatableItem]) -> None:
        item.solution_capacity = item.capacity
        item.solution_value = item.payoff
        self._solution_capacity += item.capacity
        allocation.append(item)
