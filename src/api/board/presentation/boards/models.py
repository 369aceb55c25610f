"""Pydantic models for board requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from board.application.projection import BoardView
from board.domain.aggregates import Board
from board.presentation.formatting import format_display_time
from board.presentation.replies.models import AuthorResponse, ReplyResponse


class BoardRequest(BaseModel):
    """Request model for creating or editing a board.

    Fields default to empty strings so that missing values are reported by
    the board's own validation, after the sign-in check.
    """

    title: str = Field(default="", description="Board title")
    body: str = Field(default="", description="Board content")


class BoardResponse(BaseModel):
    """Response model for a board returned to its author after a write."""

    id: str = Field(..., description="Board ID (ULID format)")
    author: AuthorResponse
    title: str = Field(..., description="Board title")
    body: str = Field(..., description="Board content")
    created_at: datetime = Field(..., description="Creation timestamp")
    created_at_display: str = Field(..., description="Creation time as YYYY-MM-DD HH:MM")

    @classmethod
    def from_domain(cls, board: Board) -> BoardResponse:
        """Convert domain Board aggregate to API response."""
        return cls(
            id=board.id.value,
            author=AuthorResponse.from_domain(board.author),
            title=board.title,
            body=board.body,
            created_at=board.created_at,
            created_at_display=format_display_time(board.created_at),
        )


class BoardSummaryResponse(BaseModel):
    """Response model for one row of the board listing."""

    id: str = Field(..., description="Board ID (ULID format)")
    author: AuthorResponse
    title: str = Field(..., description="Board title")
    created_at: datetime = Field(..., description="Creation timestamp")
    created_at_display: str = Field(..., description="Creation time as YYYY-MM-DD HH:MM")
    is_owner: bool = Field(..., description="True if the viewer wrote this board")

    @classmethod
    def from_view(cls, view: BoardView) -> BoardSummaryResponse:
        """Convert a projected board to a listing row."""
        board = view.board
        return cls(
            id=board.id.value,
            author=AuthorResponse.from_domain(board.author),
            title=board.title,
            created_at=board.created_at,
            created_at_display=format_display_time(board.created_at),
            is_owner=view.is_owner,
        )


class BoardDetailResponse(BaseModel):
    """Response model for a board page: the board and its replies."""

    id: str = Field(..., description="Board ID (ULID format)")
    author: AuthorResponse
    title: str = Field(..., description="Board title")
    body: str = Field(..., description="Board content")
    created_at: datetime = Field(..., description="Creation timestamp")
    created_at_display: str = Field(..., description="Creation time as YYYY-MM-DD HH:MM")
    is_owner: bool = Field(..., description="True if the viewer wrote this board")
    reply_count: int = Field(..., description="Number of replies")
    replies: list[ReplyResponse] = Field(
        default_factory=list, description="Replies, newest first"
    )

    @classmethod
    def from_view(cls, view: BoardView) -> BoardDetailResponse:
        """Convert a projected board with replies to API response.

        Args:
            view: Board and replies wrapped with the viewer's ownership flags

        Returns:
            BoardDetailResponse
        """
        board = view.board
        return cls(
            id=board.id.value,
            author=AuthorResponse.from_domain(board.author),
            title=board.title,
            body=board.body,
            created_at=board.created_at,
            created_at_display=format_display_time(board.created_at),
            is_owner=view.is_owner,
            reply_count=view.reply_count,
            replies=[ReplyResponse.from_view(reply) for reply in view.replies],
        )
