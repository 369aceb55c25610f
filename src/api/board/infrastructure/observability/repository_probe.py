"""Events from the boards and replies tables."""

from __future__ import annotations

from typing import Protocol

import structlog


class BoardRepositoryProbe(Protocol):
    """Domain probe for board repository operations."""

    def board_saved(self, board_id: str) -> None:
        """Record that a board was successfully saved."""
        ...

    def board_retrieved(self, board_id: str, locked: str | None) -> None:
        """Record that a board was retrieved, and which row lock it holds."""
        ...

    def board_not_found(self, board_id: str) -> None:
        """Record that a board was not found."""
        ...

    def boards_listed(self, count: int) -> None:
        """Record that the board listing was read."""
        ...

    def board_deleted(self, board_id: str) -> None:
        """Record that a board row was deleted."""
        ...


class ReplyRepositoryProbe(Protocol):
    """Domain probe for reply repository operations."""

    def reply_saved(self, reply_id: str, board_id: str) -> None:
        """Record that a reply was successfully saved."""
        ...

    def reply_not_found(self, reply_id: str) -> None:
        """Record that a reply was not found."""
        ...

    def reply_deleted(self, reply_id: str) -> None:
        """Record that a reply row was deleted."""
        ...

    def replies_deleted_for_board(self, board_id: str, count: int) -> None:
        """Record that every reply of a board was deleted."""
        ...


class DefaultBoardRepositoryProbe:
    """Default implementation of BoardRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def board_saved(self, board_id: str) -> None:
        self._logger.info(
            "board_saved",
            board_id=board_id,
        )

    def board_retrieved(self, board_id: str, locked: str | None) -> None:
        self._logger.debug(
            "board_retrieved",
            board_id=board_id,
            locked=locked,
        )

    def board_not_found(self, board_id: str) -> None:
        self._logger.debug(
            "board_not_found",
            board_id=board_id,
        )

    def boards_listed(self, count: int) -> None:
        self._logger.debug(
            "boards_listed",
            count=count,
        )

    def board_deleted(self, board_id: str) -> None:
        self._logger.info(
            "board_row_deleted",
            board_id=board_id,
        )


class DefaultReplyRepositoryProbe:
    """Default implementation of ReplyRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def reply_saved(self, reply_id: str, board_id: str) -> None:
        self._logger.info(
            "reply_saved",
            reply_id=reply_id,
            board_id=board_id,
        )

    def reply_not_found(self, reply_id: str) -> None:
        self._logger.debug(
            "reply_not_found",
            reply_id=reply_id,
        )

    def reply_deleted(self, reply_id: str) -> None:
        self._logger.info(
            "reply_row_deleted",
            reply_id=reply_id,
        )

    def replies_deleted_for_board(self, board_id: str, count: int) -> None:
        self._logger.info(
            "replies_deleted_for_board",
            board_id=board_id,
            count=count,
        )
