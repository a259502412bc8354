"""Repository interfaces for the warehouse domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from waresys.domain.repository.item import ItemRepository
from waresys.domain.repository.tag import TagRepository

__all__ = [
    "ItemRepository",
    "TagRepository",
]
