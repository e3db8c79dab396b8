"""Async engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from folio.config import Settings
from folio.util.error import ConfigurationError


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the application's single engine.

    The DI container creates it once per process and disposes it on shutdown.

    Raises:
        ConfigurationError: If DATABASE__URL is empty
    """
    url = settings.database_url
    if not url:
        raise ConfigurationError("DATABASE__URL", "is not set")

    return create_async_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,  # Survive connections dropped by the server
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Objects are not expired on commit: rows are mapped to immutable domain
    models before the session closes, and nothing is lazily loaded.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
