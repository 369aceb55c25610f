"""Application services for the board context."""

from board.application.services.board_service import BoardService
from board.application.services.reply_service import ReplyService

__all__ = [
    "BoardService",
    "ReplyService",
]
