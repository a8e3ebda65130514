"""User domain exceptions.

Custom exceptions for the user domain, used for validation, business
rule violations and the layered checks of a password change. Each one
carries a stable ErrorCode so the presentation layer can map it without
knowing the concrete type.
"""

from userhub.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidUserNameError(ValidationError):
    """Raised when a user name is empty or blank."""

    def __init__(self, message: str = "Name cannot be empty") -> None:
        super().__init__(message)


class InvalidEmailError(ValidationError):
    """Raised when an email is empty."""

    def __init__(self, message: str = "Email cannot be empty") -> None:
        super().__init__(message)


class InvalidPasswordError(ValidationError):
    """A password and its confirmation differ, or the password is unusable."""

    def __init__(self, message: str = "Password confirmation does not match") -> None:
        super().__init__(message, code=ErrorCode.INVALID_PASSWORD)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email already taken",
            code=ErrorCode.EMAIL_ALREADY_TAKEN,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "Unknown user",
            code=ErrorCode.UNKNOWN_USER,
            details={"user_id": user_id},
        )


class UnauthorizedError(DomainException):
    """The user asserting an identity does not exist."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message, code=ErrorCode.UNAUTHORIZED)


class EmailMismatchError(DomainException):
    """Supplied email differs from the one stored for the asserted user."""

    def __init__(self, message: str = "Wrong email") -> None:
        super().__init__(message, code=ErrorCode.EMAIL_MISMATCH)


class InvalidCredentialsError(DomainException):
    """The authentication gateway rejected the email/password pair."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message, code=ErrorCode.INVALID_CREDENTIALS)


class UserDeletionError(BusinessRuleViolation):
    """A user could not be deleted."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "Failed to delete user",
            code=ErrorCode.UNPROCESSABLE,
            details={"user_id": user_id},
        )


class PasswordUpdateError(DomainException):
    """The new password hash could not be persisted."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "Failed to change password",
            code=ErrorCode.INTERNAL,
            details={"user_id": user_id},
        )
