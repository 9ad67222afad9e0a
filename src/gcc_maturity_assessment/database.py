"""Async database engine and session management.

One ``AsyncSession`` is opened per request inside a transaction: it commits
when the request handler returns and rolls back when it raises, so every
service operation is all-or-nothing.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from gcc_maturity_assessment.core.models import Base
from gcc_maturity_assessment.observability import get_logger
from gcc_maturity_assessment.settings import Settings

logger = get_logger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL.

    In-memory SQLite URLs share one connection so that every session sees
    the same database.
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build the session factory used for every request."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def init_database(settings: Settings) -> AsyncEngine:
    """Create the engine and session factory and ensure all tables exist.

    Args:
        settings: Service settings providing database_url and database_echo.

    Returns:
        The initialised engine.
    """
    global _engine, _session_factory

    _engine = create_engine(settings.database_url, echo=settings.database_echo)
    _session_factory = create_session_factory(_engine)

    async with _engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    logger.info("Database initialised", dialect=_engine.dialect.name)
    return _engine


async def dispose_database() -> None:
    """Close all pooled connections."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        logger.info("Database connections closed")
    _engine = None
    _session_factory = None


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the session factory created by ``init_database``.

    Raises:
        RuntimeError: If the database has not been initialised.
    """
    if _session_factory is None:
        raise RuntimeError("Database is not initialised; call init_database() first")
    return _session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a session wrapped in a transaction.

    Yields:
        AsyncSession committed on success and rolled back on any exception.
    """
    async with get_session_factory()() as session:
        async with session.begin():
            yield session
