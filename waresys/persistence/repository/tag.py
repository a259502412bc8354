"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import Select, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from waresys.domain.error import StoreError
from waresys.domain.model.tag import PopulatedTag, Tag
from waresys.domain.repository.item import ItemRepository
from waresys.domain.repository.tag import TagRepository
from waresys.domain.value import TagId, TagQuery, TagUid
from waresys.persistence.mappers import row_to_tag, tag_to_dict
from waresys.persistence.repository.errors import store_errors
from waresys.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession, item_repository: ItemRepository) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            item_repository: Item repository used to populate item references
        """
        self.session = session
        self.item_repository = item_repository

    async def find_many(self, query: TagQuery) -> list[Tag]:
        """Find tags matching a query."""
        stmt = self._apply_query(select(tags_table), query)

        with store_errors("tags.find_many"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        with store_errors("tags.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_uid(self, uid: TagUid) -> Optional[Tag]:
        """Find tag by uid."""
        stmt = select(tags_table).where(tags_table.c.uid == uid.root)
        with store_errors("tags.find_by_uid"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def create(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        stmt = insert(tags_table).values(**tag_to_dict(tag))
        with store_errors("tags.create"):
            await self.session.execute(stmt)
            await self.session.flush()
        return tag

    async def save(self, tag: Tag) -> Tag:
        """Replace the mutable fields of an existing tag."""
        tag_dict = tag_to_dict(tag)
        # id and created_at never change
        tag_dict.pop("id")
        tag_dict.pop("created_at")

        stmt = update(tags_table).where(tags_table.c.id == tag.id).values(**tag_dict)
        with store_errors("tags.save"):
            result = await self.session.execute(stmt)
            await self.session.flush()

        if result.rowcount == 0:
            raise StoreError(f"Tag {tag.id} no longer exists")
        return tag

    async def remove(self, tag: Tag) -> Tag:
        """Delete a tag."""
        stmt = delete(tags_table).where(tags_table.c.id == tag.id)
        with store_errors("tags.remove"):
            await self.session.execute(stmt)
            await self.session.flush()
        return tag

    async def populate_item(self, tag: Tag) -> PopulatedTag:
        """Resolve the tag's item reference."""
        if tag.item_id is None:
            return PopulatedTag(tag=tag, item=None)

        item = await self.item_repository.find_by_id(tag.item_id)
        return PopulatedTag(tag=tag, item=item)

    @staticmethod
    def _apply_query(stmt: Select, query: TagQuery) -> Select:
        """Apply filter, sort, skip and limit to a select statement."""
        if query.filter.type is not None:
            stmt = stmt.where(tags_table.c.type == query.filter.type.value)

        for key in query.cursor.sort:
            column = tags_table.c[key.field.value]
            stmt = stmt.order_by(column.desc() if key.descending else column.asc())

        if query.cursor.skip:
            stmt = stmt.offset(query.cursor.skip)
        if query.cursor.limit is not None:
            stmt = stmt.limit(query.cursor.limit)
        return stmt
