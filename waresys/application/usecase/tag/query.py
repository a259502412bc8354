"""Translation of list query parameters into a repository query.

Supported parameters:

    skip   records to skip, >= 0 (default 0)
    limit  records to return, 1-100 (default 30)
    sort   comma separated fields, ``-`` prefix for descending,
           e.g. ``-updated_at,uid``
    type   only tags of this type

Bounds violations raise pydantic.ValidationError before any store access.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from waresys.domain.value import (
    Cursor,
    SortKey,
    TagFilter,
    TagQuery,
    TagSortField,
    TagType,
)

DEFAULT_LIMIT = 30
MAX_LIMIT = 100


def parse_sort(raw: str) -> tuple[SortKey, ...]:
    """Parse a sort expression such as ``-updated_at,uid``.

    Raises:
        ValueError: On unknown or repeated fields
    """
    keys: list[SortKey] = []
    seen: set[TagSortField] = set()

    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue

        descending = part.startswith("-")
        name = part.lstrip("+-")
        try:
            field = TagSortField(name)
        except ValueError:
            allowed = ", ".join(f.value for f in TagSortField)
            raise ValueError(f"Cannot sort by {name!r}, allowed: {allowed}")

        if field in seen:
            raise ValueError(f"Sort field {name!r} given more than once")
        seen.add(field)
        keys.append(SortKey(field=field, descending=descending))

    return tuple(keys)


class ListTagsRequest(BaseModel):
    """List tags request."""

    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    sort: tuple[SortKey, ...] = ()
    type: Optional[TagType] = None

    @field_validator("sort", mode="before")
    @classmethod
    def parse_sort_expression(cls, v: Any) -> Any:
        """Accept the query-string form of ``sort``."""
        if v is None:
            return ()
        if isinstance(v, str):
            return parse_sort(v)
        return v

    def to_query(self) -> TagQuery:
        """Build the repository query."""
        return TagQuery(
            filter=TagFilter(type=self.type),
            cursor=Cursor(skip=self.skip, limit=self.limit, sort=self.sort),
        )
