"""Tag entity for identifying stock items and reader modes."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from waresys.domain.model.common import DomainModel
from waresys.domain.model.item import Item
from waresys.domain.value import ItemId, TagId, TagType, TagUid


class Tag(DomainModel):
    """Tag entity.

    A tag is a physical or logical identifier. It is provisioned the first
    time its uid is looked up, then classified by type and optionally
    linked to an item.
    """

    id: TagId
    uid: Optional[TagUid] = None  # Unique when set
    type: TagType = TagType.UNKNOWN
    item_id: Optional[ItemId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PopulatedTag(DomainModel):
    """Tag with its item reference resolved."""

    tag: Tag
    item: Optional[Item] = None
