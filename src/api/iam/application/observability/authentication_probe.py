"""Sign-in, sign-out and session gate events."""

from __future__ import annotations

from typing import Protocol

import structlog


class AuthenticationProbe(Protocol):
    """Domain probe for authentication operations."""

    def user_authenticated(self, user_id: str, username: str) -> None:
        """Record that a username and credential were accepted."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record that a sign-in attempt was refused."""
        ...

    def session_started(self, user_id: str, username: str) -> None:
        """Record that an identity was bound to the client session."""
        ...

    def session_ended(self, user_id: str | None) -> None:
        """Record that the client session was cleared."""
        ...

    def anonymous_access_denied(self) -> None:
        """Record that an operation requiring sign-in was attempted anonymously."""
        ...

    def malformed_session(self, reason: str) -> None:
        """Record that a session payload could not be read as an identity."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_authenticated(self, user_id: str, username: str) -> None:
        self._logger.info(
            "user_authenticated",
            user_id=user_id,
            username=username,
        )

    def authentication_failed(self, reason: str) -> None:
        self._logger.warning(
            "authentication_failed",
            reason=reason,
        )

    def session_started(self, user_id: str, username: str) -> None:
        self._logger.info(
            "session_started",
            user_id=user_id,
            username=username,
        )

    def session_ended(self, user_id: str | None) -> None:
        self._logger.info(
            "session_ended",
            user_id=user_id,
        )

    def anonymous_access_denied(self) -> None:
        self._logger.warning(
            "anonymous_access_denied",
        )

    def malformed_session(self, reason: str) -> None:
        self._logger.warning(
            "malformed_session",
            reason=reason,
        )
