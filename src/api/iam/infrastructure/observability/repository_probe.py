"""Events from the users table: saves, lookups and unique-index clashes."""

from __future__ import annotations

from typing import Protocol

import structlog


class UserRepositoryProbe(Protocol):
    """What the user repository reports about its reads and writes."""

    def user_saved(self, user_id: str, username: str) -> None:
        """An account row was inserted or its profile columns updated."""
        ...

    def user_retrieved(self, user_id: str) -> None: ...

    def user_not_found(self, user_id: str) -> None: ...

    def username_not_found(self, username: str) -> None: ...

    def duplicate_username(self, username: str) -> None:
        """The unique username index rejected an insert."""
        ...


class DefaultUserRepositoryProbe:
    """Logs saves at info, lookups at debug and index clashes at warning."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_saved(self, user_id: str, username: str) -> None:
        self._logger.info("user_saved", user_id=user_id, username=username)

    def user_retrieved(self, user_id: str) -> None:
        self._logger.debug("user_retrieved", user_id=user_id)

    def user_not_found(self, user_id: str) -> None:
        self._logger.debug("user_not_found", user_id=user_id)

    def username_not_found(self, username: str) -> None:
        self._logger.debug("username_not_found", username=username)

    def duplicate_username(self, username: str) -> None:
        self._logger.warning("duplicate_username", username=username)
