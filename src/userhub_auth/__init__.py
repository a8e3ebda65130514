"""UserHub Auth - Generic authentication infrastructure.

This package provides authentication primitives that are independent
of the user-account domain:
- Password hashing and verification (bcrypt)
- Password strength validation

Architecture:
    userhub_auth/
    ├── services/           # Pure logic (password hashing)
    └── exceptions.py       # Auth exceptions

Usage:
    from userhub_auth import PasswordHashingService

    service = PasswordHashingService(rounds=12)
    password_hash = service.hash("correct horse")
"""

from userhub_auth.exceptions import AuthError, WeakPasswordError
from userhub_auth.services import PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    # Exceptions
    "AuthError",
    "WeakPasswordError",
]
