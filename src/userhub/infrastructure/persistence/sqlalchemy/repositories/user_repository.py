"""SQLAlchemy implementation of UserRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from userhub.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    text = str(error)
    return "UNIQUE constraint failed" in text or "unique" in text.lower()


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Email uniqueness is enforced by the unique index on ``users.email``.
    A violation surfaces on flush and is re-raised as
    EmailAlreadyExistsError; the session must then be rolled back by the
    caller that owns it.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at)
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def create(self, name: str, email: str, password_hash: str) -> User:
        user = User.create(name=name, email=email, password_hash=password_hash)
        self._session.add(self._map_to_model(user))

        await self._flush_checking_email(email)
        logger.info("Created user: %s", user.id)
        return user

    async def update_profile(self, user_id: UUID, name: str, email: str) -> User:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))

        user = self._map_to_domain(model)
        user.update_profile(name=name, email=email)
        model.name = user.name
        model.email = user.email
        model.updated_at = user.updated_at

        await self._flush_checking_email(email)
        logger.debug("Updated profile of user: %s", user_id)
        return user

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted user: %s", user_id)

    async def set_password_hash(self, user_id: UUID, password_hash: str) -> None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))

        user = self._map_to_domain(model)
        user.change_password_hash(password_hash)
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at

        await self._session.flush()
        logger.debug("Updated password hash of user: %s", user_id)

    async def _flush_checking_email(self, email: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(email) from e
            raise

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
