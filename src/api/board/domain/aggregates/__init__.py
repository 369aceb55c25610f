"""Aggregates for the board domain."""

from board.domain.aggregates.board import (
    MAX_TITLE_LENGTH,
    Board,
    validate_board_content,
)
from board.domain.aggregates.reply import (
    MAX_COMMENT_LENGTH,
    Reply,
    validate_comment,
)

__all__ = [
    "Board",
    "MAX_COMMENT_LENGTH",
    "MAX_TITLE_LENGTH",
    "Reply",
    "validate_board_content",
    "validate_comment",
]
