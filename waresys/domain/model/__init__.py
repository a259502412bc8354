"""Domain model entities for the warehouse tag registry."""

from waresys.domain.model.item import Item
from waresys.domain.model.tag import PopulatedTag, Tag

__all__ = [
    "Item",
    "PopulatedTag",
    "Tag",
]
