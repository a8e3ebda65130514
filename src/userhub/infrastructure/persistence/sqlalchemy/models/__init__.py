"""SQLAlchemy models for the user store."""

from userhub.infrastructure.persistence.sqlalchemy.base import Base, TimestampMixin
from userhub.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = ["Base", "TimestampMixin", "UserModel"]
