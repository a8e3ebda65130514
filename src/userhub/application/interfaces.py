"""Ports consumed by the application layer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Identity confirmed by a successful credential check."""

    user_id: UUID
    email: str


class AuthenticationGateway(ABC):
    """Answers whether an email/password pair matches a stored credential.

    The gateway is the only component allowed to compare a plaintext
    password with a stored hash.
    """

    @abstractmethod
    async def verify(self, email: str, password: str) -> AuthenticatedIdentity | None:
        """Return the matching identity, or None if the pair is not valid."""
