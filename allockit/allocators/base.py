from abc import ABC, abstractmethod
import logging
from typing import List, Tuple

from .._validation import is_non_negative_number
from ..item import AllocatableItem

logger = logging.getLogger(__name__)


class Allocator(ABC):
    """Abstract base class for allocation environments.

    An allocator holds an ordered collection of item references and a
    capacity constraint. Solving selects a subset of the items, writes
    their solution fields and records the aggregate payoff and capacity
    consumed.

    Items are held by reference, never copied. The same item may sit in
    several allocators; its solution fields reflect the last solve.

    Subclasses must implement:
    - allocate(): Solve and return the selected items

    Invalid capacities and non-item arguments are ignored rather than
    raised. The ``set_capacity``/``add_item``/``remove_item`` return values
    report whether anything changed.
    """

    def __init__(self):
        self.clear()

    @abstractmethod
    def allocate(self) -> List[AllocatableItem]:
        """Solve the allocation problem from the current state.

        Returns:
            The items selected into the optimal solution
        """
        pass

    def clear(self) -> None:
        """Reset to the empty, zero-capacity state."""
        self._items: List[AllocatableItem] = []
        self._capacity = 0
        self._solution_capacity = 0.0
        self._solution_payoff = 0.0

    @property
    def capacity(self) -> float:
        return self._capacity

    @capacity.setter
    def capacity(self, value):
        self.set_capacity(value)

    def set_capacity(self, value) -> bool:
        """Set the capacity constraint.

        Args:
            value: Finite, non-negative number

        Returns:
            True if accepted, False if the old capacity was kept
        """
        if not is_non_negative_number(value):
            logger.debug("Rejected capacity=%r", value)
            return False
        self._capacity = self._normalize_capacity(value)
        return True

    def _normalize_capacity(self, value):
        return value

    @property
    def solution_capacity(self) -> float:
        """Total capacity consumed by the last solution."""
        return self._solution_capacity

    @property
    def payoff(self) -> float:
        """Total payoff of the last solution."""
        return self._solution_payoff

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Tuple[AllocatableItem, ...]:
        """Current collection, in its current order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, item: AllocatableItem) -> bool:
        """Append an item reference to the collection.

        Returns:
            True if added, False if ``item`` is not an AllocatableItem
        """
        if not isinstance(item, AllocatableItem):
            logger.debug("Ignored non-item %r", item)
            return False
        self._items.append(item)
        return True

    def remove_item(self, item: AllocatableItem) -> bool:
        """Remove the first reference identical to ``item``.

        Returns:
            True if a reference was removed
        """
        for i, candidate in enumerate(self._items):
            if candidate is item:
                del self._items[i]
                return True
        return False

    def _reset_solution(self) -> None:
        self._solution_capacity = 0.0
        self._solution_payoff = 0.0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(capacity={self._capacity}, "
            f"n_items={len(self._items)})"
        )
