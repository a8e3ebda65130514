"""UserHub - user account management.

This package handles:
- User accounts (list, get, create, update profile, delete)
- Password changes with credential re-verification
- Persistence of accounts with unique emails

Password hashing lives in userhub_auth and configuration in
userhub_config.
"""

from userhub.application.dtos import (
    PasswordChangedResult,
    UserCreatedResult,
    UserIdResult,
    UserResult,
)
from userhub.application.interfaces import AuthenticatedIdentity, AuthenticationGateway
from userhub.application.services import PasswordAuthenticationService, UserService
from userhub.domain.shared.exceptions import DomainException, ErrorCode
from userhub.domain.user import (
    EmailAlreadyExistsError,
    EmailMismatchError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidPasswordError,
    InvalidUserNameError,
    PasswordUpdateError,
    UnauthorizedError,
    User,
    UserDeletionError,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    # Domain - User
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
    # Errors
    "DomainException",
    "ErrorCode",
    # Application
    "AuthenticatedIdentity",
    "AuthenticationGateway",
    "PasswordAuthenticationService",
    "UserService",
    # Results
    "PasswordChangedResult",
    "UserCreatedResult",
    "UserIdResult",
    "UserResult",
]
