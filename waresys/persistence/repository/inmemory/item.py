"""In-memory implementation of Item repository for testing."""

from copy import deepcopy
from typing import Optional

from waresys.domain.model.item import Item
from waresys.domain.repository.item import ItemRepository
from waresys.domain.value import ItemId


class InMemoryItemRepository(ItemRepository):
    """In-memory implementation of ItemRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._items: dict[ItemId, Item] = {}

    async def find_by_id(self, item_id: ItemId) -> Optional[Item]:
        """Find item by ID."""
        item = self._items.get(item_id)
        return deepcopy(item) if item else None

    async def save(self, item: Item) -> Item:
        """Save or update an item."""
        self._items[item.id] = deepcopy(item)
        return deepcopy(item)
