"""Per-viewer projection of boards and replies.

Wraps aggregates with an ``is_owner`` flag computed for one caller. The flags
exist only on these view objects; aggregates and ORM rows never carry them,
so nothing viewer-specific can be persisted. Only read paths use this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from board.domain.aggregates import Board, Reply
from iam.domain.value_objects import UserId
from shared_kernel.authorization import is_owner


@dataclass(frozen=True)
class ReplyView:
    """A reply as seen by one viewer."""

    reply: Reply
    is_owner: bool


@dataclass(frozen=True)
class BoardView:
    """A board as seen by one viewer, optionally with its replies."""

    board: Board
    is_owner: bool
    replies: tuple[ReplyView, ...] = ()

    @property
    def reply_count(self) -> int:
        return len(self.replies)


def annotate_reply(reply: Reply, caller_id: UserId | None) -> ReplyView:
    """Wrap a reply with the caller's ownership flag."""
    return ReplyView(reply=reply, is_owner=is_owner(reply.author.user_id, caller_id))


def annotate_board(
    board: Board,
    caller_id: UserId | None,
    replies: Iterable[Reply] = (),
) -> BoardView:
    """Wrap a board and its replies with the caller's ownership flags.

    Args:
        board: The board to project
        caller_id: The viewing user, or None for an anonymous viewer
        replies: The board's replies, in display order

    Returns:
        BoardView whose flags are all False when caller_id is None
    """
    return BoardView(
        board=board,
        is_owner=is_owner(board.author.user_id, caller_id),
        replies=tuple(annotate_reply(reply, caller_id) for reply in replies),
    )


def annotate_boards(
    boards: Iterable[Board], caller_id: UserId | None
) -> list[BoardView]:
    """Project a board listing, preserving order."""
    return [annotate_board(board, caller_id) for board in boards]
