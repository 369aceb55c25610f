"""Connection pool events for the bulletin database.

Emitted by the lazy engine pools and the /health/db route.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ConnectionProbe(Protocol):
    """Domain probe for database connection observability."""

    def pool_initialized(self, min_conn: int, max_conn: int) -> None:
        """Record that connection pool was initialized."""
        ...

    def pool_closed(self) -> None:
        """Record that the connection pool was closed."""
        ...

    def health_check_failed(self, error: Exception) -> None:
        """Record that the database did not answer a health check."""
        ...


class DefaultConnectionProbe:
    """ConnectionProbe that writes one structlog event per call."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def pool_initialized(self, min_conn: int, max_conn: int) -> None:
        self._logger.info(
            "connection_pool_initialized",
            min_connections=min_conn,
            max_connections=max_conn,
        )

    def pool_closed(self) -> None:
        self._logger.info("connection_pool_closed")

    def health_check_failed(self, error: Exception) -> None:
        self._logger.error(
            "database_health_check_failed",
            error=str(error),
        )
