"""Response models and helpers shared by tag use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from waresys.domain.error import ValidationError
from waresys.domain.model import Item, PopulatedTag, Tag
from waresys.domain.value import TagId, TagType


class ItemInfo(BaseModel):
    """Item as embedded in a populated tag."""

    id: str
    name: str
    description: Optional[str]


class TagInfo(BaseModel):
    """Tag in responses, with the item as a bare id."""

    id: str
    uid: Optional[str]
    type: TagType
    item: Optional[str]
    created_at: datetime
    updated_at: datetime


class PopulatedTagInfo(BaseModel):
    """Tag in responses, with the item expanded."""

    id: str
    uid: Optional[str]
    type: TagType
    item: Optional[ItemInfo]
    created_at: datetime
    updated_at: datetime


def parse_tag_id(raw: str) -> TagId:
    """Parse a tag id from a path parameter.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return TagId(UUID(raw))
    except ValueError:
        raise ValidationError(f"Invalid tag id: {raw}")


def to_tag_info(tag: Tag) -> TagInfo:
    return TagInfo(
        id=str(tag.id),
        uid=tag.uid.root if tag.uid else None,
        type=tag.type,
        item=str(tag.item_id) if tag.item_id else None,
        created_at=tag.created_at,
        updated_at=tag.updated_at,
    )


def to_item_info(item: Item) -> ItemInfo:
    return ItemInfo(id=str(item.id), name=item.name, description=item.description)


def to_populated_tag_info(populated: PopulatedTag) -> PopulatedTagInfo:
    tag = populated.tag
    return PopulatedTagInfo(
        id=str(tag.id),
        uid=tag.uid.root if tag.uid else None,
        type=tag.type,
        item=to_item_info(populated.item) if populated.item else None,
        created_at=tag.created_at,
        updated_at=tag.updated_at,
    )
