"""Domain value objects for the warehouse tag registry."""

from waresys.domain.value.identifiers import ItemId, TagId
from waresys.domain.value.query import (
    Cursor,
    SortKey,
    TagFilter,
    TagQuery,
    TagSortField,
)
from waresys.domain.value.types import (
    ExpandedItemReference,
    ItemReference,
    TagType,
    TagUid,
    resolve_item_reference,
)

__all__ = [
    # Identifiers
    "TagId",
    "ItemId",
    # Types
    "TagType",
    "TagUid",
    "ExpandedItemReference",
    "ItemReference",
    "resolve_item_reference",
    # Queries
    "Cursor",
    "SortKey",
    "TagFilter",
    "TagQuery",
    "TagSortField",
]
