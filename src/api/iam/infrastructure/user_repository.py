"""Users table access for the identity store."""

from __future__ import annotations

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import User
from iam.domain.value_objects import UserId
from iam.infrastructure.models import UserModel
from iam.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from iam.ports.exceptions import DuplicateUsernameError
from iam.ports.repositories import IUserRepository

_USERNAME_INDEX = "ix_users_username"


def _to_user(model: UserModel) -> User:
    return User(
        id=UserId(value=model.id),
        username=model.username,
        credential_hash=model.credential_hash,
        email=model.email,
        created_at=model.created_at,
    )


class UserRepository(IUserRepository):
    """Reads and writes ``users`` rows inside the caller's transaction.

    Only ``flush`` is called here; ``UserService`` owns commit and rollback.
    """

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def _one(self, stmt: Select) -> UserModel | None:
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, user: User) -> None:
        """Insert a new account or update the profile fields of an existing one.

        The username is written on insert only. A second account racing for
        the same username trips the unique index at flush time.

        Raises:
            DuplicateUsernameError: If the username index rejected the insert
        """
        model = await self._one(select(UserModel).where(UserModel.id == user.id.value))
        if model is None:
            self._session.add(
                UserModel(
                    id=user.id.value,
                    username=user.username,
                    credential_hash=user.credential_hash,
                    email=user.email,
                    created_at=user.created_at,
                )
            )
        else:
            model.credential_hash = user.credential_hash
            model.email = user.email

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _USERNAME_INDEX not in str(e):
                raise
            self._probe.duplicate_username(user.username)
            raise DuplicateUsernameError(
                f"Username '{user.username}' is already taken"
            ) from e

        self._probe.user_saved(user.id.value, user.username)

    async def get_by_id(self, user_id: UserId) -> User | None:
        model = await self._one(select(UserModel).where(UserModel.id == user_id.value))
        if model is None:
            self._probe.user_not_found(user_id.value)
            return None
        self._probe.user_retrieved(user_id.value)
        return _to_user(model)

    async def get_by_username(self, username: str) -> User | None:
        """Exact, case-sensitive match on the sign-in handle."""
        model = await self._one(
            select(UserModel).where(UserModel.username == username)
        )
        if model is None:
            self._probe.username_not_found(username)
            return None
        self._probe.user_retrieved(model.id)
        return _to_user(model)
