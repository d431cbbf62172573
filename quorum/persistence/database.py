"""PostgreSQL engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quorum.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Connections identify themselves as quorum-api so row locks taken by
    acceptance show up under that name in pg_stat_activity.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"application_name": "quorum-api"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for per-request sessions.

    Objects stay usable after commit because responses are built from them
    once the request transaction has ended.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
