"""Credential verification backed by the user store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from userhub.application.interfaces import AuthenticatedIdentity, AuthenticationGateway
from userhub_auth import PasswordHashingService

if TYPE_CHECKING:
    from userhub.domain.user import UserRepository

logger = logging.getLogger(__name__)


class PasswordAuthenticationService(AuthenticationGateway):
    """
    Authentication gateway that checks passwords against stored bcrypt hashes.

    Looks the user up by exact email and delegates the comparison to
    PasswordHashingService. An unknown email and a wrong password are
    indistinguishable to the caller.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def verify(self, email: str, password: str) -> AuthenticatedIdentity | None:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.debug("Credential check failed: unknown email")
            return None

        if not self._password_service.verify(password, user.password_hash):
            logger.debug("Credential check failed for user: %s", user.id)
            return None

        return AuthenticatedIdentity(user_id=user.id, email=user.email)
