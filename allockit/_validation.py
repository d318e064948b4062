"""Numeric checks shared by the silent-reject mutators."""

import math
import numbers


def is_finite_number(value) -> bool:
    """True for a real, finite number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def is_non_negative_number(value) -> bool:
    """True for a real, finite number >= 0."""
    return is_finite_number(value) and value >= 0
