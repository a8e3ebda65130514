from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """Request schema for creating a new user."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password: str
    password_confirm: str


class UpdateUserRequest(BaseModel):
    """Request schema for replacing a user's name and email."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a password.

    ``changePassword`` is accepted as the wire name of the new password.
    """

    email: str
    password: str
    password_confirm: str
    change_password: str = Field(..., alias="changePassword")
    change_password_confirm: str

    model_config = ConfigDict(populate_by_name=True)


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: UUID
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserCreatedResponse(BaseModel):
    """Response schema for a created user."""

    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserIdResponse(BaseModel):
    """Response schema naming the affected user."""

    id: UUID

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Response schema for a plain acknowledgement."""

    message: str

    model_config = ConfigDict(from_attributes=True)
