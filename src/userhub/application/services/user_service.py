"""User account service: listing, lifecycle and password changes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from userhub.application.dtos import (
    PasswordChangedResult,
    UserCreatedResult,
    UserIdResult,
    UserResult,
)
from userhub.domain.user import (
    EmailMismatchError,
    InvalidCredentialsError,
    InvalidPasswordError,
    PasswordUpdateError,
    UnauthorizedError,
    UserDeletionError,
    UserNotFoundError,
)
from userhub_auth import PasswordHashingService, WeakPasswordError

if TYPE_CHECKING:
    from userhub.application.interfaces import AuthenticationGateway
    from userhub.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user accounts.

    Orchestrates the user repository, the password hasher and the
    authentication gateway to provide:
    - Listing and fetching users
    - Account creation with password confirmation
    - Profile (name, email) updates
    - Account deletion
    - Password change with credential re-verification

    Every failure is raised as a DomainException subclass; results never
    contain the password hash.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        authentication_gateway: AuthenticationGateway,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._auth_gateway = authentication_gateway

    def _hash_password(self, password: str) -> str:
        try:
            return self._password_service.hash(password)
        except WeakPasswordError as e:
            raise InvalidPasswordError(e.message) from e

    async def list_users(self) -> list[UserResult]:
        users = await self._user_repo.list_all()
        return [UserResult.from_user(user) for user in users]

    async def get_user(self, user_id: UUID) -> UserResult:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return UserResult.from_user(user)

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        password_confirm: str,
    ) -> UserCreatedResult:
        if password != password_confirm:
            raise InvalidPasswordError

        password_hash = self._hash_password(password)
        user = await self._user_repo.create(
            name=name,
            email=email,
            password_hash=password_hash,
        )

        logger.info("User created: %s", user.id)
        return UserCreatedResult(name=user.name, email=user.email)

    async def update_profile(self, user_id: UUID, name: str, email: str) -> UserIdResult:
        user = await self._user_repo.update_profile(user_id, name=name, email=email)

        logger.info("Profile updated for user: %s", user.id)
        return UserIdResult(id=user.id)

    async def delete_user(self, user_id: UUID) -> UserIdResult:
        try:
            await self._user_repo.delete(user_id)
        except UserNotFoundError as e:
            raise UserDeletionError(str(user_id)) from e

        logger.info("User deleted: %s", user_id)
        return UserIdResult(id=user_id)

    async def change_password(  # NOQA: PLR0913
        self,
        user_id: UUID,
        email: str,
        password: str,
        password_confirm: str,
        change_password: str,
        change_password_confirm: str,
    ) -> PasswordChangedResult:
        """Replace a user's password after re-verifying the current one.

        The checks run in a fixed order and the first failing one decides
        the error:

        1. new password and its confirmation differ -> InvalidPasswordError
        2. no user with ``user_id`` -> UnauthorizedError
        3. stored email differs from ``email`` -> EmailMismatchError
        4. current password and its confirmation differ -> InvalidPasswordError
        5. gateway rejects (email, password) -> InvalidCredentialsError
        6. the new hash cannot be stored -> PasswordUpdateError

        The email is validated as of step 2; the hash is written by id.
        """
        if change_password != change_password_confirm:
            raise InvalidPasswordError("New password confirmation does not match")

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UnauthorizedError

        if user.email != email:
            logger.warning("Password change rejected for user %s: wrong email", user_id)
            raise EmailMismatchError

        if password != password_confirm:
            raise InvalidPasswordError("Current password confirmation does not match")

        identity = await self._auth_gateway.verify(email, password)
        if not identity:
            logger.warning(
                "Password change rejected for user %s: invalid credentials",
                user_id,
            )
            raise InvalidCredentialsError

        new_hash = self._hash_password(change_password)
        try:
            await self._user_repo.set_password_hash(user_id, new_hash)
        except UserNotFoundError as e:
            raise PasswordUpdateError(str(user_id)) from e

        logger.info("Password changed for user: %s", user_id)
        return PasswordChangedResult()
