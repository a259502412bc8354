"""Item repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from waresys.domain.model.item import Item
from waresys.domain.value import ItemId


class ItemRepository(ABC):
    """Repository interface for items referenced by tags."""

    @abstractmethod
    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find item by ID.

        Args:
            item_id: Item identifier

        Returns:
            Item if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, item: Item) -> Item:
        """Save or update an item.

        Args:
            item: Item to save

        Returns:
            Saved item
        """
        pass
