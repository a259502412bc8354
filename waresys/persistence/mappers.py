"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from waresys.domain.model import Item, Tag
from waresys.domain.value import ItemId, TagId, TagType, TagUid


def _as_uuid(value: UUID | str) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_as_uuid(row["id"])),
        uid=TagUid(row["uid"]) if row.get("uid") is not None else None,
        type=TagType(row["type"]),
        item_id=(
            ItemId(_as_uuid(row["item_id"]))
            if row.get("item_id") is not None
            else None
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Args:
        tag: Tag domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": tag.id,
        "uid": tag.uid.root if tag.uid else None,
        "type": tag.type.value,
        "item_id": tag.item_id,
        "created_at": tag.created_at,
        "updated_at": tag.updated_at,
    }


def row_to_item(row: Dict[str, Any]) -> Item:
    """Convert database row to Item domain model.

    Args:
        row: Database row as dict

    Returns:
        Item domain model
    """
    return Item(
        id=ItemId(_as_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        created_at=row["created_at"],
    )


def item_to_dict(item: Item) -> Dict[str, Any]:
    """Convert Item domain model to database dict.

    Args:
        item: Item domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return item.model_dump()
