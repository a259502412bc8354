"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from waresys.config import Settings
from waresys.domain.repository import ItemRepository, TagRepository
from waresys.persistence.database import create_engine, create_session_factory
from waresys.persistence.repository import (
    PostgresItemRepository,
    PostgresTagRepository,
)
from waresys.util.di.base import ProviderBase
from waresys.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_item_repository(self, session: AsyncSession) -> ItemRepository:
        """Provide Item repository."""
        return PostgresItemRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(
        self, session: AsyncSession, item_repository: ItemRepository
    ) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session, item_repository)
