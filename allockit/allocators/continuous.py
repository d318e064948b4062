"""Fractional (continuous) knapsack allocation."""

import copy
import logging
import numbers
from typing import Any, List, Optional

from .base import Allocator
from ..item import AllocatableItem
from ..strategies import DefaultTransformStrategy, TransformResult, is_valid_strategy

logger = logging.getLogger(__name__)


class ContinuousAllocator(Allocator):
    """Allocator that may consume any fraction of an item.

    Solves the continuous knapsack problem with Dantzig's greedy rule:
    items are ranked by transformed rate (payoff per unit capacity, by
    default) and consumed whole, highest rate first, until the next item no
    longer fits. That item is consumed fractionally to fill the remaining
    slack. Payoff is assumed linear in the capacity consumed.

    A transform strategy can alter each item's effective capacity, payoff
    and rate before the greedy pass, which supports what-if analysis
    without touching the items. Context data for the strategy is deep-copied
    when assigned.

    Examples:
        allocator = ContinuousAllocator()
        allocator.capacity = 8
        allocator.add_item(AllocatableItem(capacity=5, payoff=100))
        allocator.add_item(AllocatableItem(capacity=8, payoff=150))
        allocator.allocate()
        allocator.payoff   # 156.25
    """

    def clear(self) -> None:
        """Reset to the empty state and detach any strategy and its data."""
        super().clear()
        self._strategy = None
        self._data = None

    @property
    def strategy(self):
        """Attached transform strategy, or None before one is set or installed."""
        return self._strategy

    def add_strategy(self, strategy) -> bool:
        """Attach a transform strategy, replacing any previous one.

        Args:
            strategy: Any object with a callable ``transform(item, data)``

        Returns:
            True if attached, False if ``strategy`` was ignored
        """
        if not is_valid_strategy(strategy):
            logger.debug("Ignored strategy without transform(): %r", strategy)
            return False
        self._strategy = strategy
        return True

    @property
    def strategy_data(self) -> Optional[Any]:
        """Private copy of the context passed to every transform call."""
        return self._data

    @strategy_data.setter
    def strategy_data(self, value):
        self.set_strategy_data(value)

    def set_strategy_data(self, value) -> bool:
        """Store a deep copy of ``value`` as strategy context.

        Only container/object values are accepted; None, strings, plain
        numbers and values that cannot be deep-copied are ignored.

        Returns:
            True if stored
        """
        if value is None or isinstance(value, (str, bytes, bool, numbers.Number)):
            logger.debug("Ignored strategy data %r", value)
            return False
        try:
            data = copy.deepcopy(value)
        except (TypeError, copy.Error) as exc:
            logger.debug("Ignored uncopyable strategy data %r: %s", value, exc)
            return False
        self._data = data
        return True

    def _transform(self, item: AllocatableItem) -> TransformResult:
        return TransformResult.coerce(self._strategy.transform(item, self._data))

    def allocate(self) -> List[AllocatableItem]:
        """Solve the fractional knapsack problem.

        Every call recomputes the solution from the current items, capacity
        and strategy. If no strategy is attached, the identity strategy is
        installed and stays attached.

        Returns:
            Selected items in greedy order. Only the last one may be
            partially allocated.
        """
        self._reset_solution()
        allocation: List[AllocatableItem] = []
        n_items = len(self._items)

        if n_items == 0 or self._capacity == 0:
            logger.debug("Nothing to allocate: %d items, capacity %s", n_items, self._capacity)
            return allocation

        if self._strategy is None:
            self._strategy = DefaultTransformStrategy()

        logger.debug("Allocating %d items into capacity %s", n_items, self._capacity)

        if n_items == 1:
            item = self._items[0]
            p = self._transform(item)

            # fraction of the item that fits in the environment
            f = 1.0 if p.capacity <= self._capacity else self._capacity / p.capacity

            self._solution_capacity = f * p.capacity
            self._solution_payoff = f * p.payoff
            item.solution_capacity = self._solution_capacity
            item.solution_value = self._solution_payoff
            allocation.append(item)
            return allocation

        # Rank by transformed rate, highest first. sorted() is stable, so
        # equal rates keep their current relative order.
        ranked = sorted(
            ((item, self._transform(item)) for item in self._items),
            key=lambda pair: pair[1].rate,
            reverse=True,
        )
        self._items = [item for item, _ in ranked]

        for item, p in ranked:
            slack = self._capacity - self._solution_capacity
            if slack <= 0.0:
                break

            if p.capacity >= slack:
                # fill the remaining slack with part of this item
                value = p.rate * slack
                item.solution_capacity = slack
                item.solution_value = value
                self._solution_capacity = self._capacity
                self._solution_payoff += value
                allocation.append(item)
                logger.debug("Fractional item %r takes %s of %s", item, slack, p.capacity)
                break

            item.solution_capacity = p.capacity
            item.solution_value = p.payoff
            self._solution_capacity += p.capacity
            self._solution_payoff += p.payoff
            allocation.append(item)

        logger.debug(
            "Allocated %d items, payoff %s, capacity used %s",
            len(allocation), self._solution_payoff, self._solution_capacity,
        )
        return allocation
