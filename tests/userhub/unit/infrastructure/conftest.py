"""Fixtures for persistence tests.

The SQLAlchemy repository runs against a per-test SQLite file so the unit
suite needs no database server.
"""

# Import SQLite fixtures from shared location
from tests.shared.fixtures.database import (
    sqlite_engine,
    sqlite_session,
    sqlite_url,
)

# Make fixtures available
__all__ = ["sqlite_engine", "sqlite_session", "sqlite_url"]
