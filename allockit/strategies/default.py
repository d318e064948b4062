"""Identity transform strategy."""

from typing import Any, Optional, TYPE_CHECKING

import numpy as np

from .base import TransformStrategy, TransformResult

if TYPE_CHECKING:
    from ..item import AllocatableItem


class DefaultTransformStrategy(TransformStrategy):
    """Linear strategy that passes capacity and payoff through unchanged.

    rate = payoff / capacity
    value = (solution_capacity / capacity) * payoff

    ``value`` depends on the item's last solution and is only meaningful
    after a solve. A zero-capacity item yields an infinite or NaN rate;
    no guard is applied, so callers must not rely on zero-capacity items.
    """

    def transform(
        self,
        item: 'AllocatableItem',
        data: Optional[Any] = None,
    ) -> TransformResult:
        capacity = item.capacity
        payoff = item.payoff
        return TransformResult(
            capacity=capacity,
            payoff=payoff,
            rate=_divide(payoff, capacity),
            value=_divide(item.solution_capacity, capacity) * payoff,
        )

    def __repr__(self) -> str:
        return "DefaultTransformStrategy()"


def _divide(numerator: float, denominator: float) -> float:
    # x/0 -> +/-inf, 0/0 -> nan
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / denominator)
