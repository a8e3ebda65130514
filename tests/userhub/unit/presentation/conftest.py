"""Pytest fixtures for API tests.

The app runs against a SQLite file per test. Tables are set up in a fresh
event loop so they do not clash with the TestClient's own loop.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from userhub.infrastructure.persistence.sqlalchemy import Base
from userhub.presentation.api.app import API_V1_PREFIX, create_app
from userhub.presentation.api.dependencies import get_db_session
from userhub_config.settings import Settings, get_settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled and cheap hashing."""
    return Settings(
        database_driver="sqlite",
        sqlite_path=str(tmp_path / "api-test.db"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
    )


def _run_sync(coro) -> None:
    # Run in a fresh event loop to avoid conflicts
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


def _setup_test_database(engine) -> None:
    async def _setup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)

    _run_sync(_setup())


@pytest.fixture
def api_engine(api_settings):
    engine = create_async_engine(
        api_settings.database_url,
        echo=False,
        poolclass=NullPool,
    )
    _setup_test_database(engine)
    yield engine
    _run_sync(engine.dispose())


@pytest.fixture
def test_client(api_settings, api_engine):
    """Create a test client bound to the per-test SQLite database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        api_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    # Override settings to use test settings
    app.dependency_overrides[get_settings] = lambda: api_settings

    yield TestClient(app)


@pytest.fixture
def ana_payload() -> dict:
    return {
        "name": "Ana",
        "email": "a@x",
        "password": "p",
        "password_confirm": "p",
    }


@pytest.fixture
def ana(test_client, api_v1_prefix, ana_payload) -> dict:
    """Create Ana and return her public record."""
    response = test_client.post(f"{api_v1_prefix}/users", json=ana_payload)
    assert response.status_code == 201, response.text

    users = test_client.get(f"{api_v1_prefix}/users").json()
    return next(u for u in users if u["email"] == ana_payload["email"])
