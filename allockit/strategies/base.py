"""Transform strategy contract for what-if analysis."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..item import AllocatableItem


@dataclass(frozen=True)
class TransformResult:
    """Effective item properties seen by the continuous allocator.

    Attributes:
        capacity: Transformed capacity
        payoff: Transformed payoff
        rate: Ranking key, conventionally payoff per unit capacity
        value: Value of the item's current solution share
    """
    capacity: float
    payoff: float
    rate: float
    value: float

    @classmethod
    def coerce(cls, result: Any) -> 'TransformResult':
        """Accept a TransformResult, a mapping with the same keys, or any
        object carrying capacity/payoff/rate/value attributes."""
        if isinstance(result, cls):
            return result
        if isinstance(result, Mapping):
            return cls(
                capacity=result['capacity'],
                payoff=result['payoff'],
                rate=result['rate'],
                value=result['value'],
            )
        if all(hasattr(result, name) for name in _FIELDS):
            return cls(**{name: getattr(result, name) for name in _FIELDS})
        raise TypeError(
            f"transform() must return a TransformResult, mapping or record, "
            f"got {type(result).__name__}"
        )


_FIELDS = ('capacity', 'payoff', 'rate', 'value')


class TransformStrategy(ABC):
    """Base class for item transform strategies.

    A strategy maps an item (plus optional context data) to the capacity,
    payoff and rate the continuous allocator should use. It must not mutate
    the item.

    Subclassing is optional: the allocator accepts any object exposing a
    callable ``transform(item, data)``.
    """

    @abstractmethod
    def transform(
        self,
        item: 'AllocatableItem',
        data: Optional[Any] = None,
    ) -> TransformResult:
        """Compute transformed properties for an item.

        Args:
            item: The item to transform
            data: Context data attached to the allocator (a private copy)

        Returns:
            Transformed capacity, payoff, rate and value
        """
        pass


def is_valid_strategy(value: Any) -> bool:
    """Structural check: is ``value`` an instance exposing a callable ``transform``?

    Classes are rejected; their ``transform`` is unbound.
    """
    if value is None or isinstance(value, type):
        return False
    return callable(getattr(value, 'transform', None))
