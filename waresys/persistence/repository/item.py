"""PostgreSQL implementation of Item repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from waresys.domain.model.item import Item
from waresys.domain.repository.item import ItemRepository
from waresys.domain.value import ItemId
from waresys.persistence.mappers import item_to_dict, row_to_item
from waresys.persistence.repository.errors import store_errors
from waresys.persistence.tables import items_table


class PostgresItemRepository(ItemRepository):
    """PostgreSQL implementation of ItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find item by ID."""
        stmt = select(items_table).where(items_table.c.id == item_id)
        with store_errors("items.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_item(row._asdict()) if row else None

    async def save(self, item: Item) -> Item:
        """Save or update an item."""
        item_dict = item_to_dict(item)

        existing = await self.find_by_id(item.id)

        if existing:
            stmt = (
                update(items_table)
                .where(items_table.c.id == item.id)
                .values(**item_dict)
            )
        else:
            stmt = insert(items_table).values(**item_dict)

        with store_errors("items.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return item
