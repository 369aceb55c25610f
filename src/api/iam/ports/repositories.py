"""Persistence port for the identity store."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import User
from iam.domain.value_objects import UserId


@runtime_checkable
class IUserRepository(Protocol):
    """Stores accounts. There is no delete: accounts are never removed."""

    async def save(self, user: User) -> None:
        """Insert a new account or update an existing one's profile fields.

        Raises:
            DuplicateUsernameError: If another account already holds the
                username, including one inserted by a concurrent request
        """
        ...

    async def get_by_id(self, user_id: UserId) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None:
        """Exact match on the sign-in handle; None when nobody holds it."""
        ...
