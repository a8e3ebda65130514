"""Auth services - password hashing."""

from userhub_auth.services.password_service import PasswordHashingService

__all__ = ["PasswordHashingService"]
