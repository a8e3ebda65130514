"""User account endpoints."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.shared.exceptions import DomainException
from userhub.presentation.api.dependencies import DBSession, UserServiceDep
from userhub.presentation.api.schemas.users import (
    ChangePasswordRequest,
    CreateUserRequest,
    MessageResponse,
    UpdateUserRequest,
    UserCreatedResponse,
    UserIdResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users")


@asynccontextmanager
async def _transaction(session: AsyncSession) -> AsyncIterator[None]:
    """Commit on success, roll back when a domain error escapes."""
    try:
        yield
    except DomainException:
        await session.rollback()
        raise
    await session.commit()


@router.get(
    "",
    summary="List all users",
    responses={200: {"description": "List of all users"}},
)
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    """List all users."""
    users = await service.list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={
        200: {"description": "The user"},
        404: {"description": "Unknown user"},
    },
)
async def get_user(user_id: UUID, service: UserServiceDep) -> UserResponse:
    """Get a single user by id."""
    user = await service.get_user(user_id)
    return UserResponse.model_validate(user)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Password confirmation does not match"},
        409: {"description": "Email already taken"},
    },
)
async def create_user(
    request: CreateUserRequest,
    service: UserServiceDep,
    session: DBSession,
) -> UserCreatedResponse:
    """Create a new user."""
    async with _transaction(session):
        result = await service.create_user(
            name=request.name,
            email=request.email,
            password=request.password,
            password_confirm=request.password_confirm,
        )

    return UserCreatedResponse.model_validate(result)


@router.put(
    "/{user_id}",
    summary="Update a user's name and email",
    responses={
        200: {"description": "User updated successfully"},
        404: {"description": "Unknown user"},
        409: {"description": "Email already taken"},
    },
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    service: UserServiceDep,
    session: DBSession,
) -> UserIdResponse:
    """Replace the name and email of a user."""
    async with _transaction(session):
        result = await service.update_profile(
            user_id,
            name=request.name,
            email=request.email,
        )

    return UserIdResponse.model_validate(result)


@router.delete(
    "/{user_id}",
    summary="Delete a user",
    responses={
        200: {"description": "User deleted successfully"},
        422: {"description": "Failed to delete user"},
    },
)
async def delete_user(
    user_id: UUID,
    service: UserServiceDep,
    session: DBSession,
) -> UserIdResponse:
    """Delete a user."""
    async with _transaction(session):
        result = await service.delete_user(user_id)

    return UserIdResponse.model_validate(result)


@router.post(
    "/{user_id}/change-password",
    summary="Change a user's password",
    responses={
        200: {"description": "Password updated successfully"},
        400: {"description": "A password confirmation does not match"},
        401: {"description": "User not found"},
        403: {"description": "Wrong email or invalid credentials"},
    },
)
async def change_password(
    user_id: UUID,
    request: ChangePasswordRequest,
    service: UserServiceDep,
    session: DBSession,
) -> MessageResponse:
    """Change a password after re-verifying the current credentials."""
    async with _transaction(session):
        result = await service.change_password(
            user_id,
            email=request.email,
            password=request.password,
            password_confirm=request.password_confirm,
            change_password=request.change_password,
            change_password_confirm=request.change_password_confirm,
        )

    return MessageResponse.model_validate(result)
