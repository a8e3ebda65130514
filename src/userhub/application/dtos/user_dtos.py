"""Result records returned by the user service.

None of these carry the password hash; they are the only shapes in
which user data leaves the application layer.
"""

from dataclasses import dataclass
from uuid import UUID

from userhub.domain.user import User


@dataclass(frozen=True)
class UserResult:
    """Public view of a user account."""

    id: UUID
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResult":
        return cls(id=user.id, name=user.name, email=user.email)


@dataclass(frozen=True)
class UserCreatedResult:
    """Acknowledgement of a created account."""

    name: str
    email: str


@dataclass(frozen=True)
class UserIdResult:
    """Acknowledgement that names the affected account."""

    id: UUID


@dataclass(frozen=True)
class PasswordChangedResult:
    """Neutral acknowledgement of a password change."""

    message: str = "Password updated successfully"
