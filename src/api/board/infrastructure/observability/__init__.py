"""Domain-Oriented Observability for board infrastructure."""

from board.infrastructure.observability.repository_probe import (
    BoardRepositoryProbe,
    DefaultBoardRepositoryProbe,
    DefaultReplyRepositoryProbe,
    ReplyRepositoryProbe,
)

__all__ = [
    "BoardRepositoryProbe",
    "DefaultBoardRepositoryProbe",
    "ReplyRepositoryProbe",
    "DefaultReplyRepositoryProbe",
]
