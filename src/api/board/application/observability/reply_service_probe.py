"""Events from adding and deleting replies."""

from __future__ import annotations

from typing import Protocol

import structlog


class ReplyServiceProbe(Protocol):
    """Domain probe for reply application service operations."""

    def reply_created(self, reply_id: str, board_id: str, author_id: str) -> None:
        """Record that a reply was added to a board."""
        ...

    def reply_creation_failed(self, board_id: str, error: str) -> None:
        """Record that adding a reply failed."""
        ...

    def reply_deleted(self, reply_id: str, board_id: str) -> None:
        """Record that a reply was deleted by its author."""
        ...

    def reply_deletion_failed(self, reply_id: str, error: str) -> None:
        """Record that a reply deletion failed."""
        ...

    def anonymous_access_denied(self, operation: str) -> None:
        """Record that a gated operation was attempted without sign-in."""
        ...

    def ownership_denied(self, reply_id: str, caller_id: str) -> None:
        """Record that a non-author tried to delete a reply."""
        ...


class DefaultReplyServiceProbe:
    """Default implementation of ReplyServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def reply_created(self, reply_id: str, board_id: str, author_id: str) -> None:
        self._logger.info(
            "reply_created",
            reply_id=reply_id,
            board_id=board_id,
            author_id=author_id,
        )

    def reply_creation_failed(self, board_id: str, error: str) -> None:
        self._logger.error(
            "reply_creation_failed",
            board_id=board_id,
            error=error,
        )

    def reply_deleted(self, reply_id: str, board_id: str) -> None:
        self._logger.info(
            "reply_deleted",
            reply_id=reply_id,
            board_id=board_id,
        )

    def reply_deletion_failed(self, reply_id: str, error: str) -> None:
        self._logger.error(
            "reply_deletion_failed",
            reply_id=reply_id,
            error=error,
        )

    def anonymous_access_denied(self, operation: str) -> None:
        self._logger.warning(
            "reply_anonymous_access_denied",
            operation=operation,
        )

    def ownership_denied(self, reply_id: str, caller_id: str) -> None:
        self._logger.warning(
            "reply_ownership_denied",
            reply_id=reply_id,
            caller_id=caller_id,
        )
