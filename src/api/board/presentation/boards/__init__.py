"""Board routes and models."""

from board.presentation.boards.routes import router

__all__ = ["router"]
