"""FastAPI dependency injection for the UserHub API.

Provides dependencies for:
- Database engine and sessions
- Password hashing
- The user service wired to a request-scoped repository
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from userhub.application.services import PasswordAuthenticationService, UserService
from userhub.infrastructure.persistence.sqlalchemy import (
    Base,
    UserRepositorySQLAlchemy,
)
from userhub_auth import PasswordHashingService
from userhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    engine = engine or get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_password_service(
    settings: Settings = Depends(get_settings),
) -> PasswordHashingService:
    """Get password hashing service configured from settings."""
    return PasswordHashingService(
        rounds=settings.password_hash_rounds,
        min_length=settings.password_min_length,
    )


def build_user_service(
    session: AsyncSession,
    password_service: PasswordHashingService,
) -> UserService:
    """Wire a UserService whose store and gateway share ``session``."""
    user_repo = UserRepositorySQLAlchemy(session)
    return UserService(
        user_repository=user_repo,
        password_service=password_service,
        authentication_gateway=PasswordAuthenticationService(
            user_repository=user_repo,
            password_service=password_service,
        ),
    )


def get_user_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> UserService:
    """Get the user service for the current request."""
    return build_user_service(session, password_service)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
