"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from waresys.domain.model.tag import PopulatedTag, Tag
from waresys.domain.value import TagId, TagQuery, TagUid


class TagRepository(ABC):
    """Repository interface for Tag aggregate.

    Every method raises StoreError when the underlying store fails.
    Writes are atomic per tag only.
    """

    @abstractmethod
    async def find_many(self, query: TagQuery) -> list[Tag]:
        """Find tags matching a query.

        Args:
            query: Filter and cursor (skip, limit, sort)

        Returns:
            Matching tags in store order, or in cursor sort order when given
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_uid(self, uid: TagUid) -> Optional[Tag]:
        """Find tag by its external uid.

        Args:
            uid: Tag uid

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Args:
            tag: Tag to insert

        Returns:
            Created tag

        Raises:
            DuplicateKeyError: If the id or uid is already taken
        """
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Replace the mutable fields of an existing tag.

        Args:
            tag: Tag with updated fields

        Returns:
            Saved tag

        Raises:
            StoreError: If the tag no longer exists or the item reference is invalid
        """
        pass

    @abstractmethod
    async def remove(self, tag: Tag) -> Tag:
        """Delete a tag.

        Args:
            tag: Tag to delete

        Returns:
            The removed tag
        """
        pass

    @abstractmethod
    async def populate_item(self, tag: Tag) -> PopulatedTag:
        """Resolve the tag's item reference.

        Args:
            tag: Tag whose item should be loaded

        Returns:
            Tag paired with its item, or with None if it has no item
        """
        pass
