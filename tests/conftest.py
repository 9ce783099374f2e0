"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database, database session mocks, sample identifiers
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine bound to a single shared in-memory connection
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from stats_service.boundary.db.base import Base
    from stats_service.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_async_engine):
    """Session factory bound to the in-memory engine."""
    from sqlalchemy.ext.asyncio import async_sessionmaker

    return async_sessionmaker(
        test_async_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Provide a session on the in-memory database.

    Yields:
        AsyncSession: Test database session, rolled back afterwards
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


@pytest.fixture
def user_id() -> uuid.UUID:
    """Generate a test user ID."""
    return uuid.uuid4()


@pytest.fixture
def course_id() -> uuid.UUID:
    """Generate a test course ID."""
    return uuid.uuid4()


@pytest.fixture
def session_id() -> uuid.UUID:
    """Generate a test session ID."""
    return uuid.uuid4()
