"""Events from board creation, edits and cascading deletes.

Denied calls log at warning so ownership probing shows up in the logs.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class BoardServiceProbe(Protocol):
    """Domain probe for board application service operations."""

    def board_created(self, board_id: str, author_id: str) -> None:
        """Record that a board was created."""
        ...

    def board_creation_failed(self, author_id: str | None, error: str) -> None:
        """Record that board creation failed."""
        ...

    def board_updated(self, board_id: str, author_id: str) -> None:
        """Record that a board's title and body were changed."""
        ...

    def board_update_failed(self, board_id: str, error: str) -> None:
        """Record that a board update failed."""
        ...

    def board_deleted(self, board_id: str, replies_deleted: int) -> None:
        """Record that a board and its replies were deleted."""
        ...

    def board_deletion_failed(self, board_id: str, error: str) -> None:
        """Record that a board deletion failed and was rolled back."""
        ...

    def anonymous_access_denied(self, operation: str) -> None:
        """Record that a gated operation was attempted without sign-in."""
        ...

    def ownership_denied(self, board_id: str, caller_id: str) -> None:
        """Record that a non-author tried to change a board."""
        ...


class DefaultBoardServiceProbe:
    """Default implementation of BoardServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def board_created(self, board_id: str, author_id: str) -> None:
        """Record that a board was created."""
        self._logger.info(
            "board_created",
            board_id=board_id,
            author_id=author_id,
        )

    def board_creation_failed(self, author_id: str | None, error: str) -> None:
        """Record that board creation failed."""
        self._logger.error(
            "board_creation_failed",
            author_id=author_id,
            error=error,
        )

    def board_updated(self, board_id: str, author_id: str) -> None:
        """Record that a board's title and body were changed."""
        self._logger.info(
            "board_updated",
            board_id=board_id,
            author_id=author_id,
        )

    def board_update_failed(self, board_id: str, error: str) -> None:
        """Record that a board update failed."""
        self._logger.error(
            "board_update_failed",
            board_id=board_id,
            error=error,
        )

    def board_deleted(self, board_id: str, replies_deleted: int) -> None:
        """Record that a board and its replies were deleted."""
        self._logger.info(
            "board_deleted",
            board_id=board_id,
            replies_deleted=replies_deleted,
        )

    def board_deletion_failed(self, board_id: str, error: str) -> None:
        """Record that a board deletion failed and was rolled back."""
        self._logger.error(
            "board_deletion_failed",
            board_id=board_id,
            error=error,
        )

    def anonymous_access_denied(self, operation: str) -> None:
        """Record that a gated operation was attempted without sign-in."""
        self._logger.warning(
            "board_anonymous_access_denied",
            operation=operation,
        )

    def ownership_denied(self, board_id: str, caller_id: str) -> None:
        """Record that a non-author tried to change a board."""
        self._logger.warning(
            "board_ownership_denied",
            board_id=board_id,
            caller_id=caller_id,
        )
