from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from board.application.observability import (
    BoardServiceProbe,
    DefaultBoardServiceProbe,
)
from board.application.services import BoardService
from board.infrastructure.board_repository import BoardRepository
from board.infrastructure.reply_repository import ReplyRepository
from iam.dependencies.user import get_user_repository
from iam.infrastructure.user_repository import UserRepository
from infrastructure.database.dependencies import get_read_session, get_write_session


def get_board_service_probe() -> BoardServiceProbe:
    """Get BoardServiceProbe instance.

    Returns:
        DefaultBoardServiceProbe instance for observability
    """
    return DefaultBoardServiceProbe()


def get_board_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> BoardRepository:
    """Get BoardRepository instance bound to the write session."""
    return BoardRepository(session=session)


def get_reply_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> ReplyRepository:
    """Get ReplyRepository instance bound to the write session."""
    return ReplyRepository(session=session)


def get_board_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    board_repo: Annotated[BoardRepository, Depends(get_board_repository)],
    reply_repo: Annotated[ReplyRepository, Depends(get_reply_repository)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    probe: Annotated[BoardServiceProbe, Depends(get_board_service_probe)],
) -> BoardService:
    """Get BoardService instance for mutations.

    Args:
        session: Database session for transaction management
        board_repo: Board repository (shares session via FastAPI dependency caching)
        reply_repo: Reply repository (same session)
        user_repo: User repository used to resolve the author (same session)
        probe: Board service probe for observability

    Returns:
        BoardService instance
    """
    return BoardService(
        session=session,
        board_repository=board_repo,
        reply_repository=reply_repo,
        user_repository=user_repo,
        probe=probe,
    )


def get_board_query_service(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    probe: Annotated[BoardServiceProbe, Depends(get_board_service_probe)],
) -> BoardService:
    """Get BoardService instance bound to the read session.

    Used by listing and detail routes, which take no row locks.
    """
    return BoardService(
        session=session,
        board_repository=BoardRepository(session=session),
        reply_repository=ReplyRepository(session=session),
        user_repository=UserRepository(session=session),
        probe=probe,
    )
