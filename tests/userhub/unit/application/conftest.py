"""Fixtures for application service tests.

Services run against the in-memory user store and the real bcrypt
hasher at minimum cost.
"""

import pytest

from userhub.application.interfaces import AuthenticatedIdentity, AuthenticationGateway
from userhub.application.services import PasswordAuthenticationService, UserService
from userhub.infrastructure.persistence.in_memory import InMemoryUserRepository
from userhub_auth import PasswordHashingService


class CountingGateway(AuthenticationGateway):
    """Gateway that records every call before delegating."""

    def __init__(self, inner: AuthenticationGateway):
        self._inner = inner
        self.calls: list[tuple[str, str]] = []

    async def verify(self, email: str, password: str) -> AuthenticatedIdentity | None:
        self.calls.append((email, password))
        return await self._inner.verify(email, password)


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def gateway(user_repo, password_service) -> CountingGateway:
    return CountingGateway(
        PasswordAuthenticationService(
            user_repository=user_repo,
            password_service=password_service,
        )
    )


@pytest.fixture
def service(user_repo, password_service, gateway) -> UserService:
    return UserService(
        user_repository=user_repo,
        password_service=password_service,
        authentication_gateway=gateway,
    )
