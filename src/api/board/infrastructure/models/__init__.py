"""SQLAlchemy ORM models for the board context.

These models map to database tables and are used by repository implementations.
"""

from board.infrastructure.models.board import BoardModel
from board.infrastructure.models.reply import ReplyModel

__all__ = [
    "BoardModel",
    "ReplyModel",
]
