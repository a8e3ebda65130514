"""User domain manages user accounts.

This domain handles:
- User aggregate (id, name, email, password hash)
- Repository contract with email uniqueness
- Errors raised by the account lifecycle and password changes
"""

from userhub.domain.user.aggregates import User
from userhub.domain.user.exceptions import (
    EmailAlreadyExistsError,
    EmailMismatchError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidPasswordError,
    InvalidUserNameError,
    PasswordUpdateError,
    UnauthorizedError,
    UserDeletionError,
    UserNotFoundError,
)
from userhub.domain.user.repositories import UserRepository

__all__ = [
    "EmailAlreadyExistsError",
    "EmailMismatchError",
    "InvalidCredentialsError",
    "InvalidEmailError",
    "InvalidPasswordError",
    "InvalidUserNameError",
    "PasswordUpdateError",
    "UnauthorizedError",
    "User",
    "UserDeletionError",
    "UserNotFoundError",
    "UserRepository",
]
