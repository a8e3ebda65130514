"""Pydantic schemas for API requests and responses."""

from userhub.presentation.api.schemas.users import (
    ChangePasswordRequest,
    CreateUserRequest,
    MessageResponse,
    UpdateUserRequest,
    UserCreatedResponse,
    UserIdResponse,
    UserResponse,
)

__all__ = [
    "ChangePasswordRequest",
    "CreateUserRequest",
    "MessageResponse",
    "UpdateUserRequest",
    "UserCreatedResponse",
    "UserIdResponse",
    "UserResponse",
]
