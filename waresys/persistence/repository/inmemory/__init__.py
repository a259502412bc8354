"""In-memory repository implementations for testing."""

from .item import InMemoryItemRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryItemRepository",
    "InMemoryTagRepository",
]
