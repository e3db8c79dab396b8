"""Persistence component: PostgreSQL in production, in-memory in tests."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from folio.config import Settings
from folio.domain.repository import EntryRepository
from folio.persistence.database import create_engine, create_session_factory
from folio.persistence.repository import PostgresEntryRepository
from folio.util.di.base import ProviderBase
from folio.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Entries stored in PostgreSQL.

    One engine per process (APP scope); one session per request, committed
    when the request succeeds and rolled back when it raises.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request failed, transaction rolled back", error=str(e))
                raise
            else:
                await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_entry_repository(self, session: AsyncSession) -> EntryRepository:
        return PostgresEntryRepository(session)
