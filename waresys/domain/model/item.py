"""Item entity referenced by tags."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from waresys.domain.model.common import DomainModel
from waresys.domain.value import ItemId


class Item(DomainModel):
    """Stock item.

    Items are managed outside the tags API; tags only point at them.
    """

    id: ItemId
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
