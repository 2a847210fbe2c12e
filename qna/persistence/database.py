"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qna.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine sized from ``settings.database``.

    SQL echo follows ``settings.debug``.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=db.pool_pre_ping,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; one session per request, no expiry on commit, no autoflush."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
