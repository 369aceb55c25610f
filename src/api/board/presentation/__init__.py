"""Board presentation layer - one package per aggregate."""

from __future__ import annotations

from fastapi import APIRouter

from board.presentation import boards, replies

router = APIRouter()

router.include_router(boards.router)
router.include_router(replies.router)

__all__ = ["router"]
