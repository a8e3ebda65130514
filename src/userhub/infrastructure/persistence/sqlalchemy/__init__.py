"""SQLAlchemy persistence for the user store.

Usage:
    from userhub.infrastructure.persistence.sqlalchemy import (
        Base,
        UserModel,
        UserRepositorySQLAlchemy,
    )
"""

from userhub.infrastructure.persistence.sqlalchemy.models import (
    Base,
    TimestampMixin,
    UserModel,
)
from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
