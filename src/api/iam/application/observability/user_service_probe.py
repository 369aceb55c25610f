"""Events from account registration and profile edits.

Usernames are logged; raw or hashed credentials never are.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def user_registered(self, user_id: str, username: str) -> None:
        """Record that a new user account was created."""
        ...

    def registration_rejected(self, username: str, reason: str) -> None:
        """Record that sign-up input was refused (invalid or duplicate)."""
        ...

    def registration_failed(self, username: str, error: str) -> None:
        """Record that registration failed unexpectedly."""
        ...

    def profile_updated(self, user_id: str) -> None:
        """Record that a user changed their credential and email."""
        ...

    def profile_update_failed(self, user_id: str, error: str) -> None:
        """Record that a profile update failed."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_registered(self, user_id: str, username: str) -> None:
        """Record that a new user account was created."""
        self._logger.info(
            "user_registered",
            user_id=user_id,
            username=username,
        )

    def registration_rejected(self, username: str, reason: str) -> None:
        """Record that sign-up input was refused."""
        self._logger.warning(
            "user_registration_rejected",
            username=username,
            reason=reason,
        )

    def registration_failed(self, username: str, error: str) -> None:
        """Record that registration failed unexpectedly."""
        self._logger.error(
            "user_registration_failed",
            username=username,
            error=error,
        )

    def profile_updated(self, user_id: str) -> None:
        """Record that a user changed their credential and email."""
        self._logger.info(
            "user_profile_updated",
            user_id=user_id,
        )

    def profile_update_failed(self, user_id: str, error: str) -> None:
        """Record that a profile update failed."""
        self._logger.error(
            "user_profile_update_failed",
            user_id=user_id,
            error=error,
        )
