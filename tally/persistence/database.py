"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tally.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Guarded vote updates rely on READ COMMITTED: a blocked UPDATE re-checks
    its WHERE clause against the row version committed by the winner, so a
    stale guard matches zero rows instead of double counting.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        isolation_level="READ COMMITTED",
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for one unit of work per request."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
