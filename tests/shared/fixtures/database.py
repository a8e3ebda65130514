"""
Database fixtures for repository and API tests.

Two backends are provided:
- SQLite (aiosqlite) in a per-test temporary file, for the fast unit suite
- Testcontainers PostgreSQL, for integration tests

Usage:
    from tests.shared.fixtures.database import sqlite_session

    async def test_something(sqlite_session):
        repo = UserRepositorySQLAlchemy(sqlite_session)
        await repo.create("Ana", "ana@example.com", "hash")
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from userhub.infrastructure.persistence.sqlalchemy import Base

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:16-alpine"


def _session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# =============================================================================
# SQLite
# =============================================================================


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    """URL of a fresh SQLite database file for this test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'userhub-test.db'}"


@pytest_asyncio.fixture
async def sqlite_engine(sqlite_url):
    """Async engine on the per-test SQLite file, with tables created."""
    engine = create_async_engine(sqlite_url, echo=False, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_session(sqlite_engine):
    """Provide a session on the SQLite test database."""
    async with _session_maker(sqlite_engine)() as session:
        yield session
        await session.rollback()


# =============================================================================
# PostgreSQL (Testcontainers)
# =============================================================================


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets a clean database state via table drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def async_engine(postgres_container):
    """
    Create an async SQLAlchemy engine connected to the test container.

    Session-scoped to avoid recreating the engine for each test.
    """
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    return create_async_engine(
        async_url,
        echo=False,
        poolclass=NullPool,  # Avoid connection pool issues across event loops
    )


@pytest_asyncio.fixture
async def db_session(async_engine):
    """
    Provide an isolated PostgreSQL session for each test.

    Tables are dropped and recreated before the test and dropped after it.
    """
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with _session_maker(async_engine)() as session:
        yield session
        await session.rollback()

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
