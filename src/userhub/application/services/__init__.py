"""Application services for user accounts."""

from userhub.application.services.authentication_service import (
    PasswordAuthenticationService,
)
from userhub.application.services.user_service import UserService

__all__ = ["PasswordAuthenticationService", "UserService"]
