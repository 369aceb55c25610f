from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from board.application.observability import (
    DefaultReplyServiceProbe,
    ReplyServiceProbe,
)
from board.application.services import ReplyService
from board.dependencies.board import get_board_repository, get_reply_repository
from board.infrastructure.board_repository import BoardRepository
from board.infrastructure.reply_repository import ReplyRepository
from infrastructure.database.dependencies import get_write_session


def get_reply_service_probe() -> ReplyServiceProbe:
    """Get ReplyServiceProbe instance.

    Returns:
        DefaultReplyServiceProbe instance for observability
    """
    return DefaultReplyServiceProbe()


def get_reply_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    reply_repo: Annotated[ReplyRepository, Depends(get_reply_repository)],
    board_repo: Annotated[BoardRepository, Depends(get_board_repository)],
    probe: Annotated[ReplyServiceProbe, Depends(get_reply_service_probe)],
) -> ReplyService:
    """Get ReplyService instance.

    Args:
        session: Database session for transaction management
        reply_repo: Reply repository (shares session via FastAPI dependency caching)
        board_repo: Board repository used to lock the parent board
        probe: Reply service probe for observability

    Returns:
        ReplyService instance
    """
    return ReplyService(
        session=session,
        reply_repository=reply_repo,
        board_repository=board_repo,
        probe=probe,
    )
