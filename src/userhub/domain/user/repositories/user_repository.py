"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from userhub.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations own id assignment and must make the email uniqueness
    check atomic with the insert or update that depends on it.
    """

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Find a user by their exact email address."""

    @abstractmethod
    async def create(self, name: str, email: str, password_hash: str) -> User:
        """
        Create and persist a new user.

        Raises
        ------
        EmailAlreadyExistsError
            If another user already uses ``email``
        """

    @abstractmethod
    async def update_profile(self, user_id: UUID, name: str, email: str) -> User:
        """
        Replace a user's name and email.

        Raises
        ------
        UserNotFoundError
            If no user has ``user_id``
        EmailAlreadyExistsError
            If a different user already uses ``email``
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """
        Delete a user by ID.

        Raises
        ------
        UserNotFoundError
            If no user has ``user_id``
        """

    @abstractmethod
    async def set_password_hash(self, user_id: UUID, password_hash: str) -> None:
        """
        Store a new password hash for a user.

        Raises
        ------
        UserNotFoundError
            If no user has ``user_id``
        """
