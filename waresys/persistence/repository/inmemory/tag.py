"""In-memory implementation of Tag repository for testing."""

from copy import deepcopy
from typing import Optional

from waresys.domain.error import DuplicateKeyError, StoreError
from waresys.domain.model.tag import PopulatedTag, Tag
from waresys.domain.repository.item import ItemRepository
from waresys.domain.repository.tag import TagRepository
from waresys.domain.value import TagId, TagQuery, TagUid


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing.

    Mirrors the database constraints: unique uid and an item reference
    that must exist.
    """

    def __init__(self, item_repository: ItemRepository) -> None:
        """Initialize empty repository.

        Args:
            item_repository: Item repository used for reference checks and population
        """
        self.item_repository = item_repository
        self._tags: dict[TagId, Tag] = {}  # Insertion order is the natural order
        self._uid_index: dict[str, TagId] = {}

    async def find_many(self, query: TagQuery) -> list[Tag]:
        """Find tags matching a query."""
        tags = list(self._tags.values())

        if query.filter.type is not None:
            tags = [t for t in tags if t.type == query.filter.type]

        # Stable sort, least significant key first. NULLs sort last ascending.
        for key in reversed(query.cursor.sort):
            field = key.field.value
            tags.sort(
                key=lambda t: _sort_value(getattr(t, field)),
                reverse=key.descending,
            )

        start = query.cursor.skip
        end = start + query.cursor.limit if query.cursor.limit is not None else None
        return [deepcopy(tag) for tag in tags[start:end]]

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        tag = self._tags.get(tag_id)
        return deepcopy(tag) if tag else None

    async def find_by_uid(self, uid: TagUid) -> Optional[Tag]:
        """Find tag by uid."""
        tag_id = self._uid_index.get(uid.root)
        if tag_id:
            tag = self._tags.get(tag_id)
            return deepcopy(tag) if tag else None
        return None

    async def create(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        if tag.id in self._tags:
            raise DuplicateKeyError(f"Duplicate tag id: {tag.id}")
        if tag.uid is not None and tag.uid.root in self._uid_index:
            raise DuplicateKeyError(f"Duplicate tag uid: {tag.uid.root}")
        await self._check_item(tag)

        self._tags[tag.id] = deepcopy(tag)
        if tag.uid is not None:
            self._uid_index[tag.uid.root] = tag.id
        return deepcopy(tag)

    async def save(self, tag: Tag) -> Tag:
        """Replace the mutable fields of an existing tag."""
        existing = self._tags.get(tag.id)
        if existing is None:
            raise StoreError(f"Tag {tag.id} no longer exists")
        if tag.uid is not None:
            owner = self._uid_index.get(tag.uid.root)
            if owner is not None and owner != tag.id:
                raise DuplicateKeyError(f"Duplicate tag uid: {tag.uid.root}")
        await self._check_item(tag)

        if existing.uid is not None:
            self._uid_index.pop(existing.uid.root, None)
        stored = tag.model_copy(update={"created_at": existing.created_at})
        self._tags[tag.id] = deepcopy(stored)
        if stored.uid is not None:
            self._uid_index[stored.uid.root] = stored.id
        return deepcopy(stored)

    async def remove(self, tag: Tag) -> Tag:
        """Delete a tag."""
        removed = self._tags.pop(tag.id, None)
        if removed is not None and removed.uid is not None:
            self._uid_index.pop(removed.uid.root, None)
        return deepcopy(removed or tag)

    async def populate_item(self, tag: Tag) -> PopulatedTag:
        """Resolve the tag's item reference."""
        if tag.item_id is None:
            return PopulatedTag(tag=tag, item=None)
        item = await self.item_repository.find_by_id(tag.item_id)
        return PopulatedTag(tag=tag, item=item)

    async def _check_item(self, tag: Tag) -> None:
        """Reject references to items that don't exist, like a foreign key."""
        if tag.item_id is None:
            return
        if await self.item_repository.find_by_id(tag.item_id) is None:
            raise StoreError(f"Item {tag.item_id} does not exist")


def _sort_value(value):
    if value is None:
        return (1, "")
    if hasattr(value, "root"):
        value = value.root
    elif hasattr(value, "value"):
        value = value.value
    return (0, value)
