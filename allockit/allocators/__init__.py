"""Allocation environments."""

from .base import Allocator
from .continuous import ContinuousAllocator
from .binary import BinaryAllocator

__all__ = [
    "Allocator",
    "ContinuousAllocator",
    "BinaryAllocator",
]
