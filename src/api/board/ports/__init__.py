"""Ports (interfaces) for the board context.

Ports define the contracts for repositories without specifying
implementation details.
"""

from board.ports.exceptions import BoardNotFoundError, ReplyNotFoundError
from board.ports.repositories import IBoardRepository, IReplyRepository, RowLock

__all__ = [
    "BoardNotFoundError",
    "IBoardRepository",
    "IReplyRepository",
    "ReplyNotFoundError",
    "RowLock",
]
