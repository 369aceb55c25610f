"""Pydantic models for reply requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from board.application.projection import ReplyView
from board.domain.value_objects import Author
from board.presentation.formatting import format_display_time


class AuthorResponse(BaseModel):
    """Response model for the author of a board or reply."""

    id: str = Field(..., description="User ID (ULID format)")
    username: str = Field(..., description="Author's username")

    @classmethod
    def from_domain(cls, author: Author) -> AuthorResponse:
        """Convert an Author value object to API response."""
        return cls(id=author.user_id.value, username=author.username)


class CreateReplyRequest(BaseModel):
    """Request model for adding a reply.

    The comment defaults to an empty string so a missing value is reported
    by the reply's own validation.
    """

    comment: str = Field(default="", description="Reply text, at most 500 characters")


class ReplyResponse(BaseModel):
    """Response model for a reply, flagged for the viewer."""

    id: str = Field(..., description="Reply ID (ULID format)")
    board_id: str = Field(..., description="Parent board ID")
    author: AuthorResponse
    comment: str = Field(..., description="Reply text")
    created_at: datetime = Field(..., description="Creation timestamp")
    created_at_display: str = Field(..., description="Creation time as YYYY-MM-DD HH:MM")
    is_owner: bool = Field(..., description="True if the viewer wrote this reply")

    @classmethod
    def from_view(cls, view: ReplyView) -> ReplyResponse:
        """Convert a projected reply to API response.

        Args:
            view: Reply wrapped with the viewer's ownership flag

        Returns:
            ReplyResponse
        """
        reply = view.reply
        return cls(
            id=reply.id.value,
            board_id=reply.board_id.value,
            author=AuthorResponse.from_domain(reply.author),
            comment=reply.comment,
            created_at=reply.created_at,
            created_at_display=format_display_time(reply.created_at),
            is_owner=view.is_owner,
        )
