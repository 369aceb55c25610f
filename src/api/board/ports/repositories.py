"""Repository protocols (ports) for the board context.

Implementations never begin or commit transactions. Application services
wrap each use case in ``session.begin()`` and pass a ``RowLock`` when a
check-then-act sequence must not race with a concurrent writer.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable

from board.domain.aggregates import Board, Reply
from board.domain.value_objects import BoardId, ReplyId


class RowLock(StrEnum):
    """Row lock taken when loading an aggregate inside a transaction."""

    # Blocks concurrent deletes but not other readers (parent of a new reply)
    SHARE = "share"
    # Exclusive; held while ownership is checked and the row is changed
    UPDATE = "update"


@runtime_checkable
class IBoardRepository(Protocol):
    """Repository for Board aggregate persistence."""

    async def save(self, board: Board) -> None:
        """Persist a board aggregate.

        Creates a new board or updates title and body of an existing one.
        Author and creation time are never rewritten.
        """
        ...

    async def get_by_id(
        self, board_id: BoardId, lock: RowLock | None = None
    ) -> Board | None:
        """Retrieve a board by ID with its author resolved.

        Args:
            board_id: The unique identifier of the board
            lock: Optional row lock to hold until the transaction ends

        Returns:
            The Board aggregate, or None if not found
        """
        ...

    async def list_all(self) -> list[Board]:
        """List every board, newest first."""
        ...

    async def delete(self, board_id: BoardId) -> bool:
        """Delete a board row.

        Replies must already have been removed in the same transaction.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class IReplyRepository(Protocol):
    """Repository for Reply aggregate persistence."""

    async def save(self, reply: Reply) -> None:
        """Insert a reply. Replies are never updated."""
        ...

    async def get_by_id(
        self, reply_id: ReplyId, lock: RowLock | None = None
    ) -> Reply | None:
        """Retrieve a reply by ID with its author resolved.

        Args:
            reply_id: The unique identifier of the reply
            lock: Optional row lock to hold until the transaction ends

        Returns:
            The Reply aggregate, or None if not found
        """
        ...

    async def list_by_board(self, board_id: BoardId) -> list[Reply]:
        """List the replies of a board, newest first."""
        ...

    async def delete(self, reply_id: ReplyId) -> bool:
        """Delete a single reply.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def delete_by_board(self, board_id: BoardId) -> int:
        """Delete every reply of a board.

        Returns:
            Number of replies deleted
        """
        ...
