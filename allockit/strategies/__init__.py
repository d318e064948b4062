"""Item transform strategies."""

from .base import TransformStrategy, TransformResult, is_valid_strategy
from .default import DefaultTransformStrategy

__all__ = [
    "TransformStrategy",
    "TransformResult",
    "DefaultTransformStrategy",
    "is_valid_strategy",
]
