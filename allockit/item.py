"""Allocatable item entity."""

import logging

from ._validation import is_finite_number, is_non_negative_number

logger = logging.getLogger(__name__)


class AllocatableItem:
    """A candidate resource competing for an environment's capacity.

    An item consumes ``capacity`` (time, space, weight, ...) and yields
    ``payoff`` if all of that capacity is allocated. Risk factors carry the
    uncertainty of those point estimates and may be read by a transform
    strategy during what-if analysis.

    Solution fields (``solution_capacity``, ``solution_value``) are written
    by whichever allocator last solved with this item; an item may be shared
    by several allocators, so they are last-writer-wins.

    Invalid assignments are ignored and the previous value is kept. Use the
    ``set_*`` methods to learn whether an assignment was accepted.

    Examples:
        item = AllocatableItem(capacity=5, payoff=100, name='server-a')
        item.capacity = -1          # rejected, capacity stays 5
        item.set_payoff(float('nan'))   # returns False
    """

    def __init__(
        self,
        capacity: float = 0.0,
        payoff: float = 0.0,
        capacity_risk: float = 0.0,
        payoff_risk: float = 0.0,
        name: str = "",
        id: int = 0,
    ):
        """Initialize an item.

        Args:
            capacity: Capacity consumed when fully allocated (>= 0)
            payoff: Payoff gained when fully allocated (>= 0)
            capacity_risk: Risk factor on capacity (any sign)
            payoff_risk: Risk factor on payoff (any sign)
            name: Free-form identifier
            id: Free-form integer identifier
        """
        self.name = name
        self.id = id

        self._capacity = 0.0
        self._payoff = 0.0
        self._capacity_risk = 0.0
        self._payoff_risk = 0.0
        self._solution_capacity = 0.0
        self._solution_value = 0.0

        self.set_capacity(capacity)
        self.set_payoff(payoff)
        self.set_capacity_risk(capacity_risk)
        self.set_payoff_risk(payoff_risk)

    def _accept(self, field: str, value, valid: bool) -> bool:
        if valid:
            setattr(self, field, value)
        else:
            logger.debug("Rejected %s=%r for %r", field.lstrip('_'), value, self)
        return valid

    def set_capacity(self, value) -> bool:
        return self._accept('_capacity', value, is_non_negative_number(value))

    def set_payoff(self, value) -> bool:
        return self._accept('_payoff', value, is_non_negative_number(value))

    def set_solution_value(self, value) -> bool:
        return self._accept('_solution_value', value, is_non_negative_number(value))

    def set_solution_capacity(self, value) -> bool:
        return self._accept('_solution_capacity', value, is_finite_number(value))

    def set_capacity_risk(self, value) -> bool:
        return self._accept('_capacity_risk', value, is_finite_number(value))

    def set_payoff_risk(self, value) -> bool:
        return self._accept('_payoff_risk', value, is_finite_number(value))

    @property
    def capacity(self) -> float:
        return self._capacity

    @capacity.setter
    def capacity(self, value):
        self.set_capacity(value)

    @property
    def payoff(self) -> float:
        return self._payoff

    @payoff.setter
    def payoff(self, value):
        self.set_payoff(value)

    @property
    def solution_value(self) -> float:
        """Payoff credited to this item in the last solution it took part in."""
        return self._solution_value

    @solution_value.setter
    def solution_value(self, value):
        self.set_solution_value(value)

    @property
    def solution_capacity(self) -> float:
        """Capacity consumed by this item in the last solution it took part in."""
        return self._solution_capacity

    @solution_capacity.setter
    def solution_capacity(self, value):
        self.set_solution_capacity(value)

    @property
    def capacity_risk(self) -> float:
        return self._capacity_risk

    @capacity_risk.setter
    def capacity_risk(self, value):
        self.set_capacity_risk(value)

    @property
    def payoff_risk(self) -> float:
        return self._payoff_risk

    @payoff_risk.setter
    def payoff_risk(self, value):
        self.set_payoff_risk(value)

    def reset_solution(self) -> None:
        """Zero the solver-written fields."""
        self._solution_capacity = 0.0
        self._solution_value = 0.0

    def clone(self) -> 'AllocatableItem':
        """Copy the baseline definition into a new item.

        Only capacity, payoff and the risk factors are copied. Solution
        fields, name and id start fresh on the clone.
        """
        return AllocatableItem(
            capacity=self._capacity,
            payoff=self._payoff,
            capacity_risk=self._capacity_risk,
            payoff_risk=self._payoff_risk,
        )

    def __repr__(self) -> str:
        return (
            f"AllocatableItem(name='{self.name}', capacity={self._capacity}, "
            f"payoff={self._payoff})"
        )
