"""Reply routes and models."""

from board.presentation.replies.routes import router

__all__ = ["router"]
