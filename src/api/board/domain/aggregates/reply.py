"""Reply aggregate for the board context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from board.domain.value_objects import Author, BoardId, ReplyId
from shared_kernel.exceptions import ValidationError

MAX_COMMENT_LENGTH = 500


def validate_comment(comment: str | None) -> None:
    """Check that a comment is present and not too long.

    Raises:
        ValidationError: If the comment is blank or over the limit
    """
    if comment is None or not comment.strip():
        raise ValidationError({"comment": "Comment is required"})
    if len(comment.strip()) > MAX_COMMENT_LENGTH:
        raise ValidationError(
            {"comment": f"Comment must be at most {MAX_COMMENT_LENGTH} characters"}
        )


@dataclass(frozen=True)
class Reply:
    """A comment attached to exactly one board.

    Replies are immutable once created: the parent board, author and text
    never change. A reply is removed either by its author or together with
    its board.
    """

    id: ReplyId
    board_id: BoardId
    author: Author
    comment: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, board_id: BoardId, author: Author, comment: str) -> Reply:
        """Factory method for creating a new reply.

        Args:
            board_id: The parent board, which must exist
            author: The replying user
            comment: Comment text, already validated

        Returns:
            A new Reply aggregate with a fresh ID
        """
        return cls(
            id=ReplyId.generate(),
            board_id=board_id,
            author=author,
            comment=comment.strip(),
        )
