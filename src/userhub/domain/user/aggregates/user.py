"""User aggregate for account concerns."""

from datetime import datetime
from uuid import UUID, uuid4

from userhub.domain.shared.time import utc_now
from userhub.domain.user.exceptions import InvalidEmailError, InvalidUserNameError


def _require_name(name: str) -> str:
    if not name or not name.strip():
        raise InvalidUserNameError
    return name


def _require_email(email: str) -> str:
    # Stored verbatim: lookups and uniqueness are exact-match
    if not email:
        raise InvalidEmailError
    return email


class User:
    """
    User aggregate root.

    Holds the account identity (id, name, email) together with the opaque
    password hash. The hash never leaves the application layer: results
    and API responses are built from id, name and email only.
    """

    def __init__(
        self,
        name: str,
        email: str,
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._name = _require_name(name)
        self._email = _require_email(email)
        self._password_hash = password_hash
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(self, name: str, email: str) -> None:
        self._name = _require_name(name)
        self._email = _require_email(email)
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(cls, name: str, email: str, password_hash: str) -> "User":
        return cls(name=name, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        email: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r}, email={self._email})"
