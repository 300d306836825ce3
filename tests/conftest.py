"""Global pytest fixtures for the exercism core.

This module provides shared fixtures for testing including:
- An in-memory SQLite database per test
- Session and session-factory fixtures
- Curriculum fixtures built from fake language curricula
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from exercism.curriculum.registry import Curriculum
from exercism.infrastructure.database.models import Base
from exercism.infrastructure.database.session import create_session_factory
from tests.factories import FakePythonCurriculum, FakeRubyCurriculum

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ===========================================
# DATABASE FIXTURES
# ===========================================


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with all tables created."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ===========================================
# CURRICULUM FIXTURES
# ===========================================


@pytest.fixture
def curriculum() -> Curriculum:
    """Registry holding the fake Python and Ruby curricula."""
    curriculum = Curriculum()
    curriculum.add(FakePythonCurriculum())
    curriculum.add(FakeRubyCurriculum())
    return curriculum
