"""In-memory User Repository for tests and local tooling."""

import asyncio
import copy
import logging
from uuid import UUID

from userhub.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of the User repository.

    Stores users in a dict keyed by id. Writes that depend on the email
    uniqueness check run under a single asyncio.Lock, so concurrent tasks
    cannot both claim the same email. Users handed out are copies; a
    caller mutating one does not change the stored record.

    Examples
    --------
    >>> repo = InMemoryUserRepository()
    >>> user = await repo.create("Ana", "ana@example.com", "hash")
    >>> found = await repo.find_by_email("ana@example.com")
    """

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._lock = asyncio.Lock()

    async def list_all(self) -> list[User]:
        users = sorted(self._users.values(), key=lambda u: u.created_at)
        return [copy.copy(user) for user in users]

    async def find_by_id(self, user_id: UUID) -> User | None:
        user = self._users.get(user_id)
        return copy.copy(user) if user else None

    async def find_by_email(self, email: str) -> User | None:
        user = self._find_by_email(email)
        return copy.copy(user) if user else None

    async def create(self, name: str, email: str, password_hash: str) -> User:
        async with self._lock:
            if self._find_by_email(email) is not None:
                raise EmailAlreadyExistsError(email)

            user = User.create(name=name, email=email, password_hash=password_hash)
            self._users[user.id] = user

        logger.info("Created user: %s", user.id)
        return copy.copy(user)

    async def update_profile(self, user_id: UUID, name: str, email: str) -> User:
        async with self._lock:
            stored = self._users.get(user_id)
            if stored is None:
                raise UserNotFoundError(str(user_id))

            owner = self._find_by_email(email)
            if owner is not None and owner.id != user_id:
                raise EmailAlreadyExistsError(email)

            updated = copy.copy(stored)
            updated.update_profile(name=name, email=email)
            self._users[user_id] = updated

        logger.debug("Updated profile of user: %s", user_id)
        return copy.copy(updated)

    async def delete(self, user_id: UUID) -> None:
        if self._users.pop(user_id, None) is None:
            raise UserNotFoundError(str(user_id))
        logger.info("Deleted user: %s", user_id)

    async def set_password_hash(self, user_id: UUID, password_hash: str) -> None:
        stored = self._users.get(user_id)
        if stored is None:
            raise UserNotFoundError(str(user_id))

        updated = copy.copy(stored)
        updated.change_password_hash(password_hash)
        self._users[user_id] = updated

    def _find_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None
