"""Storage layer abstractions and adapters."""

from .base import DependencyRepository
from .memory import InMemoryDependencyRepository

__all__ = [
    "DependencyRepository",
    "InMemoryDependencyRepository",
]
