"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    sqlite_engine,
    sqlite_session,
    sqlite_url,
)

__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
    "sqlite_url",
]
