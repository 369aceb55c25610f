"""Lifespan events for the bulletin API process."""

from __future__ import annotations

from typing import Protocol

import structlog


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def application_started(self, app_name: str, version: str) -> None:
        """Record that the application finished starting."""
        ...

    def application_stopped(self, app_name: str) -> None:
        """Record that the application shut down and released its pools."""
        ...

    def default_session_secret_in_use(self) -> None:
        """Record that sessions are signed with the built-in development key."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def application_started(self, app_name: str, version: str) -> None:
        self._logger.info(
            "application_started",
            app_name=app_name,
            version=version,
        )

    def application_stopped(self, app_name: str) -> None:
        self._logger.info(
            "application_stopped",
            app_name=app_name,
        )

    def default_session_secret_in_use(self) -> None:
        self._logger.warning(
            "default_session_secret_in_use",
            hint="set BULLETIN_SESSION_SECRET_KEY outside local development",
        )
