"""Reply application service.

Only the author of a reply may delete it. The author of the parent board
has no moderation rights over other users' replies.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from board.application.observability import (
    DefaultReplyServiceProbe,
    ReplyServiceProbe,
)
from board.domain.aggregates import Reply, validate_comment
from board.domain.value_objects import Author, BoardId, ReplyId
from board.ports.exceptions import BoardNotFoundError, ReplyNotFoundError
from board.ports.repositories import IBoardRepository, IReplyRepository, RowLock
from iam.application.value_objects import SessionIdentity
from shared_kernel.authorization import ensure_owner, require_identity
from shared_kernel.exceptions import DomainError, ForbiddenError, UnauthorizedError


class ReplyService:
    """Application service for replies. Manages database transactions."""

    def __init__(
        self,
        session: AsyncSession,
        reply_repository: IReplyRepository,
        board_repository: IBoardRepository,
        probe: ReplyServiceProbe | None = None,
    ):
        """Initialize ReplyService with dependencies.

        Args:
            session: Database session for transaction management
            reply_repository: Repository for reply persistence
            board_repository: Repository used to lock the parent board
            probe: Optional domain probe for observability
        """
        self._session = session
        self._reply_repository = reply_repository
        self._board_repository = board_repository
        self._probe = probe or DefaultReplyServiceProbe()

    def _require(self, caller: SessionIdentity | None, operation: str) -> SessionIdentity:
        try:
            return require_identity(caller)
        except UnauthorizedError:
            self._probe.anonymous_access_denied(operation=operation)
            raise

    async def create_reply(
        self, board_id: BoardId, comment: str, caller: SessionIdentity | None
    ) -> Reply:
        """Add a reply by the caller to an existing board.

        The parent board is share-locked for the rest of the transaction, so
        a concurrent board delete either completes first (and this fails
        with BoardNotFoundError) or waits until the reply is committed and
        then removes it along with the board.

        Args:
            board_id: The parent board
            comment: Reply text, 1 to 500 characters after trimming
            caller: The caller's session identity

        Returns:
            The created Reply aggregate

        Raises:
            UnauthorizedError: If the caller is anonymous
            ValidationError: If the comment is blank or too long
            BoardNotFoundError: If the board does not exist
        """
        identity = self._require(caller, "create_reply")
        validate_comment(comment)

        try:
            async with self._session.begin():
                board = await self._board_repository.get_by_id(
                    board_id, lock=RowLock.SHARE
                )
                if board is None:
                    raise BoardNotFoundError(f"Board {board_id} not found")

                reply = Reply.create(
                    board_id=board.id,
                    author=Author(user_id=identity.user_id, username=identity.username),
                    comment=comment,
                )
                await self._reply_repository.save(reply)

            self._probe.reply_created(
                reply_id=reply.id.value,
                board_id=board_id.value,
                author_id=identity.user_id.value,
            )
            return reply

        except DomainError:
            raise
        except Exception as e:
            self._probe.reply_creation_failed(board_id=board_id.value, error=str(e))
            raise

    async def delete_reply(
        self, reply_id: ReplyId, caller: SessionIdentity | None
    ) -> None:
        """Delete a reply written by the caller.

        Raises:
            UnauthorizedError: If the caller is anonymous
            ReplyNotFoundError: If the reply does not exist
            ForbiddenError: If the caller is not the reply's author
        """
        identity = self._require(caller, "delete_reply")

        try:
            async with self._session.begin():
                reply = await self._reply_repository.get_by_id(
                    reply_id, lock=RowLock.UPDATE
                )
                if reply is None:
                    raise ReplyNotFoundError(f"Reply {reply_id} not found")

                try:
                    ensure_owner(
                        reply.author.user_id, identity.user_id, f"reply {reply_id}"
                    )
                except ForbiddenError:
                    self._probe.ownership_denied(
                        reply_id=reply_id.value, caller_id=identity.user_id.value
                    )
                    raise

                await self._reply_repository.delete(reply_id)

            self._probe.reply_deleted(
                reply_id=reply_id.value, board_id=reply.board_id.value
            )

        except DomainError:
            raise
        except Exception as e:
            self._probe.reply_deletion_failed(reply_id=reply_id.value, error=str(e))
            raise
