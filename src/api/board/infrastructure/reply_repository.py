"""PostgreSQL implementation of IReplyRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.aggregates import Reply
from board.domain.value_objects import Author, BoardId, ReplyId
from board.infrastructure.locking import apply_row_lock
from board.infrastructure.models import ReplyModel
from board.infrastructure.observability import (
    DefaultReplyRepositoryProbe,
    ReplyRepositoryProbe,
)
from board.ports.repositories import IReplyRepository, RowLock
from iam.domain.value_objects import UserId
from iam.infrastructure.models import UserModel


class ReplyRepository(IReplyRepository):
    """PostgreSQL-backed repository for Reply aggregates.

    The repository never opens or commits transactions.
    """

    def __init__(
        self, session: AsyncSession, probe: ReplyRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultReplyRepositoryProbe()

    async def save(self, reply: Reply) -> None:
        """Insert a reply.

        Args:
            reply: The Reply aggregate to persist
        """
        model = ReplyModel(
            id=reply.id.value,
            board_id=reply.board_id.value,
            author_id=reply.author.user_id.value,
            comment=reply.comment,
            created_at=reply.created_at,
        )
        self._session.add(model)
        await self._session.flush()

        self._probe.reply_saved(reply.id.value, reply.board_id.value)

    async def get_by_id(
        self, reply_id: ReplyId, lock: RowLock | None = None
    ) -> Reply | None:
        """Retrieve a reply by ID.

        Args:
            reply_id: The unique identifier of the reply
            lock: Optional row lock held until the transaction ends

        Returns:
            The Reply aggregate, or None if not found
        """
        stmt = (
            select(ReplyModel, UserModel.username)
            .join(UserModel, UserModel.id == ReplyModel.author_id)
            .where(ReplyModel.id == reply_id.value)
        )
        stmt = apply_row_lock(stmt, lock, of=ReplyModel)
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            self._probe.reply_not_found(reply_id.value)
            return None

        model, username = row
        return self._to_aggregate(model, username)

    async def list_by_board(self, board_id: BoardId) -> list[Reply]:
        """List the replies of a board, newest first.

        Args:
            board_id: The parent board

        Returns:
            Reply aggregates ordered by identifier descending
        """
        stmt = (
            select(ReplyModel, UserModel.username)
            .join(UserModel, UserModel.id == ReplyModel.author_id)
            .where(ReplyModel.board_id == board_id.value)
            .order_by(ReplyModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_aggregate(model, username) for model, username in result.all()]

    async def delete(self, reply_id: ReplyId) -> bool:
        """Delete a single reply.

        Returns:
            True if deleted, False if not found
        """
        stmt = delete(ReplyModel).where(ReplyModel.id == reply_id.value)
        result = await self._session.execute(stmt)

        if result.rowcount == 0:
            self._probe.reply_not_found(reply_id.value)
            return False

        self._probe.reply_deleted(reply_id.value)
        return True

    async def delete_by_board(self, board_id: BoardId) -> int:
        """Delete every reply of a board.

        Returns:
            Number of replies deleted
        """
        stmt = delete(ReplyModel).where(ReplyModel.board_id == board_id.value)
        result = await self._session.execute(stmt)

        count = result.rowcount
        self._probe.replies_deleted_for_board(board_id.value, count)
        return count

    def _to_aggregate(self, model: ReplyModel, username: str) -> Reply:
        return Reply(
            id=ReplyId(value=model.id),
            board_id=BoardId(value=model.board_id),
            author=Author(user_id=UserId(value=model.author_id), username=username),
            comment=model.comment,
            created_at=model.created_at,
        )
