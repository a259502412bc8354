"""PostgreSQL repository implementations."""

from waresys.persistence.repository.item import PostgresItemRepository
from waresys.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresItemRepository",
    "PostgresTagRepository",
]
