"""PostgreSQL implementation of IBoardRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.aggregates import Board
from board.domain.value_objects import Author, BoardId
from board.infrastructure.locking import apply_row_lock
from board.infrastructure.models import BoardModel
from board.infrastructure.observability import (
    BoardRepositoryProbe,
    DefaultBoardRepositoryProbe,
)
from board.ports.repositories import IBoardRepository, RowLock
from iam.domain.value_objects import UserId
from iam.infrastructure.models import UserModel


class BoardRepository(IBoardRepository):
    """PostgreSQL-backed repository for Board aggregates.

    Reads join the users table so each Board carries its author's username.
    The repository never opens or commits transactions.
    """

    def __init__(
        self, session: AsyncSession, probe: BoardRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultBoardRepositoryProbe()

    async def save(self, board: Board) -> None:
        """Persist a board aggregate.

        Inserts a new board, or updates title and body of an existing one.

        Args:
            board: The Board aggregate to persist
        """
        stmt = select(BoardModel).where(BoardModel.id == board.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.title = board.title
            model.body = board.body
        else:
            model = BoardModel(
                id=board.id.value,
                author_id=board.author.user_id.value,
                title=board.title,
                body=board.body,
                created_at=board.created_at,
            )
            self._session.add(model)

        await self._session.flush()
        self._probe.board_saved(board.id.value)

    async def get_by_id(
        self, board_id: BoardId, lock: RowLock | None = None
    ) -> Board | None:
        """Retrieve a board by ID.

        Args:
            board_id: The unique identifier of the board
            lock: Optional row lock held until the transaction ends

        Returns:
            The Board aggregate, or None if not found
        """
        stmt = (
            select(BoardModel, UserModel.username)
            .join(UserModel, UserModel.id == BoardModel.author_id)
            .where(BoardModel.id == board_id.value)
        )
        stmt = apply_row_lock(stmt, lock, of=BoardModel)
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            self._probe.board_not_found(board_id.value)
            return None

        model, username = row
        self._probe.board_retrieved(
            board_id.value, locked=lock.value if lock is not None else None
        )
        return self._to_aggregate(model, username)

    async def list_all(self) -> list[Board]:
        """List every board, newest first.

        Returns:
            Board aggregates ordered by identifier descending
        """
        stmt = (
            select(BoardModel, UserModel.username)
            .join(UserModel, UserModel.id == BoardModel.author_id)
            .order_by(BoardModel.id.desc())
        )
        result = await self._session.execute(stmt)
        boards = [self._to_aggregate(model, username) for model, username in result.all()]

        self._probe.boards_listed(len(boards))
        return boards

    async def delete(self, board_id: BoardId) -> bool:
        """Delete a board row.

        Args:
            board_id: The board to delete

        Returns:
            True if deleted, False if not found
        """
        stmt = delete(BoardModel).where(BoardModel.id == board_id.value)
        result = await self._session.execute(stmt)

        if result.rowcount == 0:
            self._probe.board_not_found(board_id.value)
            return False

        self._probe.board_deleted(board_id.value)
        return True

    def _to_aggregate(self, model: BoardModel, username: str) -> Board:
        return Board(
            id=BoardId(value=model.id),
            author=Author(user_id=UserId(value=model.author_id), username=username),
            title=model.title,
            body=model.body,
            created_at=model.created_at,
        )
