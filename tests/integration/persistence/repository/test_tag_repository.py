"""Integration tests for PostgresTagRepository.

These tests verify query translation and constraint handling against a
real database.
"""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from waresys.domain.error import DuplicateKeyError, StoreError
from waresys.domain.repository import ItemRepository, TagRepository
from waresys.domain.value import (
    Cursor,
    ItemId,
    SortKey,
    TagFilter,
    TagQuery,
    TagSortField,
    TagType,
)
from tests.factories import make_item, make_tag
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestTagRepositoryIntegration:
    """Integration tests for PostgresTagRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find(self, integration_env):
        """Created tags come back by id and by uid with timestamps intact."""
        # Arrange
        tag_repo = await integration_env.get(TagRepository)
        tag = await tag_repo.create(make_tag(uid="04A224B2C35E80"))

        # Act
        by_id = await tag_repo.find_by_id(tag.id)
        by_uid = await tag_repo.find_by_uid(tag.uid)

        # Assert
        assert by_id is not None
        assert by_id.id == tag.id
        assert by_id.uid == tag.uid
        assert by_id.type == TagType.UNKNOWN
        assert by_id.created_at == tag.created_at
        assert by_id.created_at.tzinfo is not None
        assert by_uid is not None
        assert by_uid.id == tag.id

    @pytest.mark.asyncio
    async def test_sort_skip_and_limit(self, integration_env):
        """Descending uid sort puts missing uids first, like the in-memory store."""
        # Arrange
        tag_repo = await integration_env.get(TagRepository)
        for uid in ["A", "C", None, "B"]:
            await tag_repo.create(make_tag(uid=uid))

        query = TagQuery(
            cursor=Cursor(
                skip=1,
                limit=2,
                sort=(SortKey(field=TagSortField.UID, descending=True),),
            )
        )

        # Act
        result = await tag_repo.find_many(query)

        # Assert
        assert [t.uid.root for t in result] == ["C", "B"]

    @pytest.mark.asyncio
    async def test_type_filter(self, integration_env):
        tag_repo = await integration_env.get(TagRepository)
        await tag_repo.create(make_tag(uid="A", type=TagType.MODE))
        await tag_repo.create(make_tag(uid="B"))

        result = await tag_repo.find_many(
            TagQuery(filter=TagFilter(type=TagType.MODE))
        )

        assert [t.uid.root for t in result] == ["A"]

    @pytest.mark.asyncio
    async def test_duplicate_uid_raises_duplicate_key(self, integration_env):
        """The unique uid index surfaces as DuplicateKeyError."""
        # Arrange
        tag_repo = await integration_env.get(TagRepository)
        session = await integration_env.get(AsyncSession)
        await tag_repo.create(make_tag(uid="ABC123"))

        # Act & Assert
        with pytest.raises(DuplicateKeyError):
            async with session.begin_nested():
                await tag_repo.create(make_tag(uid="ABC123"))

    @pytest.mark.asyncio
    async def test_unknown_item_raises_store_error(self, integration_env):
        """The item foreign key surfaces as a plain StoreError."""
        # Arrange
        tag_repo = await integration_env.get(TagRepository)
        session = await integration_env.get(AsyncSession)
        tag = make_tag(uid="ABC123", type=TagType.ITEM, item_id=ItemId(uuid4()))

        # Act & Assert
        with pytest.raises(StoreError) as exc_info:
            async with session.begin_nested():
                await tag_repo.create(tag)
        assert not isinstance(exc_info.value, DuplicateKeyError)

    @pytest.mark.asyncio
    async def test_save_of_missing_tag_raises_store_error(self, integration_env):
        tag_repo = await integration_env.get(TagRepository)

        with pytest.raises(StoreError):
            await tag_repo.save(make_tag(uid="ABC123"))

    @pytest.mark.asyncio
    async def test_save_and_populate_item(self, integration_env):
        """A saved item link is resolved through the item repository."""
        # Arrange
        item_repo = await integration_env.get(ItemRepository)
        tag_repo = await integration_env.get(TagRepository)
        item = await item_repo.save(make_item())
        tag = await tag_repo.create(make_tag(uid="ABC123"))

        # Act
        saved = await tag_repo.save(
            tag.model_copy(update={"type": TagType.ITEM, "item_id": item.id})
        )
        populated = await tag_repo.populate_item(saved)

        # Assert
        stored = await tag_repo.find_by_id(tag.id)
        assert stored is not None
        assert stored.item_id == item.id
        assert populated.item is not None
        assert populated.item.id == item.id
        assert populated.item.name == item.name

    @pytest.mark.asyncio
    async def test_remove(self, integration_env):
        tag_repo = await integration_env.get(TagRepository)
        tag = await tag_repo.create(make_tag(uid="ABC123"))

        await tag_repo.remove(tag)

        assert await tag_repo.find_by_id(tag.id) is None
