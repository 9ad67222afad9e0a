"""Test fixtures for gcc-maturity-assessment.

Integration fixtures run against an in-memory SQLite database created fresh
for every test, seeded with the reference questionnaire and resource hub.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from gcc_maturity_assessment.adapters.reference_data_seeder import seed_reference_data
from gcc_maturity_assessment.core.models import Base
from gcc_maturity_assessment.database import (
    create_engine,
    create_session_factory,
    get_db_session,
)
from gcc_maturity_assessment.main import create_app
from gcc_maturity_assessment.settings import Settings

_TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with all tables created."""
    test_engine = create_engine(_TEST_DATABASE_URL)
    async with test_engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture()
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine, with reference data seeded."""
    factory = create_session_factory(engine)
    async with factory() as session:
        async with session.begin():
            await seed_reference_data(session)
    return factory


@pytest_asyncio.fixture()
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """A session whose work is rolled back after the test."""
    async with session_factory() as test_session:
        yield test_session
        await test_session.rollback()


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


@pytest.fixture()
def app() -> FastAPI:
    """Application built from test settings; the lifespan is not run."""
    return create_app(
        Settings(database_url=_TEST_DATABASE_URL, seed_reference_data=False)
    )


@pytest_asyncio.fixture()
async def client(
    app: FastAPI,
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client whose requests use the test database."""

    async def _test_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as request_session:
            async with request_session.begin():
                yield request_session

    app.dependency_overrides[get_db_session] = _test_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
