"""Allocation Toolkit - continuous and 0-1 knapsack allocation of weighted items."""

from .item import AllocatableItem
from .data import ItemData
from .table import create_table
from .strategies import TransformStrategy, TransformResult, DefaultTransformStrategy
from .allocators import Allocator, ContinuousAllocator, BinaryAllocator

__all__ = [
    # Core
    "AllocatableItem",
    "ItemData",
    "create_table",
    # Strategies
    "TransformStrategy",
    "TransformResult",
    "DefaultTransformStrategy",
    # Allocators
    "Allocator",
    "ContinuousAllocator",
    "BinaryAllocator",
]

__version__ = "0.1.0"
