"""Domain-Oriented Observability for the board application layer."""

from board.application.observability.board_service_probe import (
    BoardServiceProbe,
    DefaultBoardServiceProbe,
)
from board.application.observability.reply_service_probe import (
    DefaultReplyServiceProbe,
    ReplyServiceProbe,
)

__all__ = [
    "BoardServiceProbe",
    "DefaultBoardServiceProbe",
    "ReplyServiceProbe",
    "DefaultReplyServiceProbe",
]
