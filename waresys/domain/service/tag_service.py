"""Tag domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from waresys.domain.error import (
    ConflictError,
    DuplicateKeyError,
    NotFoundError,
    RemovalError,
    StoreError,
    ValidationError,
)
from waresys.domain.model.tag import PopulatedTag, Tag
from waresys.domain.repository.tag import TagRepository
from waresys.domain.value import ItemId, TagId, TagQuery, TagType, TagUid

from .base import Service


class TagService(Service):
    """Domain service for tag operations.

    Store failures propagate as StoreError except where noted.
    """

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def list_tags(self, query: TagQuery) -> list[Tag]:
        """List tags.

        Args:
            query: Validated filter and cursor

        Returns:
            List of tags
        """
        with logfire.span(
            "tag_service.list_tags",
            skip=query.cursor.skip,
            limit=query.cursor.limit,
        ):
            tags = await self.tag_repository.find_many(query)
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_tag(self, tag_id: TagId) -> Tag:
        """Get a tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            The tag

        Raises:
            NotFoundError: If no tag has this ID
        """
        with logfire.span("tag_service.get_tag", tag_id=str(tag_id)):
            tag = await self.tag_repository.find_by_id(tag_id)
            if tag is None:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            return tag

    async def get_or_create_by_uid(self, uid: TagUid) -> tuple[Tag, bool]:
        """Get the tag with this uid, provisioning it on first sight.

        A new tag has only its uid set. No lock is taken: if another request
        inserts the same uid first, the store's unique index rejects this
        insert and a ConflictError is raised.

        Args:
            uid: External tag uid

        Returns:
            Tuple of (tag, created)

        Raises:
            ConflictError: If a concurrent request created the same uid
        """
        with logfire.span("tag_service.get_or_create_by_uid", uid=uid.root):
            existing = await self.tag_repository.find_by_uid(uid)
            if existing is not None:
                return existing, False

            try:
                tag = await self.tag_repository.create(
                    Tag(id=TagId(uuid4()), uid=uid)
                )
            except DuplicateKeyError:
                logfire.warn("Concurrent tag creation", uid=uid.root)
                raise ConflictError("Tag", "uid", uid.root)

            logfire.info("Tag created", tag_id=str(tag.id), uid=uid.root)
            return tag, True

    async def update_tag(
        self, tag_id: TagId, type: str, item_id: ItemId | None
    ) -> PopulatedTag:
        """Set a tag's type and item, then populate the item.

        Args:
            tag_id: Tag identifier
            type: New tag type, one of the TagType values
            item_id: Item to link, or None to unlink

        Returns:
            Updated tag with its item resolved

        Raises:
            NotFoundError: If no tag has this ID
            ValidationError: If the type is not a TagType value
        """
        with logfire.span("tag_service.update_tag", tag_id=str(tag_id)):
            tag = await self.get_tag(tag_id)

            try:
                tag_type = TagType(type)
            except ValueError:
                raise ValidationError(
                    f"Invalid tag type: {type!r}, "
                    f"expected one of {[t.value for t in TagType]}"
                )

            updated = tag.model_copy(
                update={
                    "type": tag_type,
                    "item_id": item_id,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            saved = await self.tag_repository.save(updated)
            logfire.info(
                "Tag updated",
                tag_id=str(saved.id),
                type=saved.type.value,
                item_id=str(saved.item_id) if saved.item_id else None,
            )
            return await self.tag_repository.populate_item(saved)

    async def delete_tag(self, tag_id: TagId) -> Tag:
        """Delete a tag.

        Args:
            tag_id: Tag identifier

        Returns:
            The removed tag

        Raises:
            NotFoundError: If no tag has this ID
            RemovalError: If the tag exists but the store failed to remove it
        """
        with logfire.span("tag_service.delete_tag", tag_id=str(tag_id)):
            tag = await self.get_tag(tag_id)

            try:
                removed = await self.tag_repository.remove(tag)
            except StoreError as e:
                logfire.error("Tag removal failed", tag_id=str(tag_id), error=str(e))
                raise RemovalError("Tag", str(tag_id)) from e

            logfire.info("Tag deleted", tag_id=str(tag_id))
            return removed
