"""Query value objects passed from the application layer to repositories."""

from enum import Enum

from pydantic import Field

from waresys.domain.value.common import ValueObject
from waresys.domain.value.types import TagType


class TagSortField(str, Enum):
    """Tag fields that lists can be sorted by."""

    UID = "uid"
    TYPE = "type"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class SortKey(ValueObject):
    """Single sort criterion."""

    field: TagSortField
    descending: bool = False


class Cursor(ValueObject):
    """Pagination and ordering for list queries.

    An empty ``sort`` keeps the store's natural order.
    """

    skip: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)
    sort: tuple[SortKey, ...] = ()


class TagFilter(ValueObject):
    """Equality filter over tags. Unset fields match everything."""

    type: TagType | None = None


class TagQuery(ValueObject):
    """Complete list query. Projection is always all fields."""

    filter: TagFilter = TagFilter()
    cursor: Cursor = Cursor()
