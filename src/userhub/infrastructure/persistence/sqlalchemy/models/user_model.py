"""SQLAlchemy model for User aggregate."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from userhub.infrastructure.persistence.sqlalchemy.base import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    The unique index on email is what makes concurrent creates and
    profile updates safe; the repository turns its violation into
    EmailAlreadyExistsError.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    # bcrypt format, ~60 chars
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
