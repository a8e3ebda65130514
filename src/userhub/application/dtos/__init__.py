"""Data transfer objects produced by the application layer."""

from userhub.application.dtos.user_dtos import (
    PasswordChangedResult,
    UserCreatedResult,
    UserIdResult,
    UserResult,
)

__all__ = [
    "PasswordChangedResult",
    "UserCreatedResult",
    "UserIdResult",
    "UserResult",
]
