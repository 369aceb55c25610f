"""Board application service.

Orchestrates board creation, editing and deletion. Every mutating use case
runs the same sequence: authentication gate, input validation, row-locked
load, ownership check, then the change. Nothing is written before the
ownership check passes.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from board.application.observability import (
    BoardServiceProbe,
    DefaultBoardServiceProbe,
)
from board.application.projection import (
    BoardView,
    annotate_board,
    annotate_boards,
)
from board.domain.aggregates import Board, validate_board_content
from board.domain.value_objects import Author, BoardId
from board.ports.exceptions import BoardNotFoundError
from board.ports.repositories import IBoardRepository, IReplyRepository, RowLock
from iam.application.value_objects import SessionIdentity
from iam.ports.repositories import IUserRepository
from shared_kernel.authorization import ensure_owner, require_identity
from shared_kernel.exceptions import DomainError, ForbiddenError, UnauthorizedError


class BoardService:
    """Application service for boards.

    Manages database transactions. Callers pass the resolved session
    identity explicitly, or None for an anonymous caller.
    """

    def __init__(
        self,
        session: AsyncSession,
        board_repository: IBoardRepository,
        reply_repository: IReplyRepository,
        user_repository: IUserRepository,
        probe: BoardServiceProbe | None = None,
    ):
        """Initialize BoardService with dependencies.

        Args:
            session: Database session for transaction management
            board_repository: Repository for board persistence
            reply_repository: Repository for reply persistence
            user_repository: Identity store used to resolve authors
            probe: Optional domain probe for observability
        """
        self._session = session
        self._board_repository = board_repository
        self._reply_repository = reply_repository
        self._user_repository = user_repository
        self._probe = probe or DefaultBoardServiceProbe()

    def _require(self, caller: SessionIdentity | None, operation: str) -> SessionIdentity:
        try:
            return require_identity(caller)
        except UnauthorizedError:
            self._probe.anonymous_access_denied(operation=operation)
            raise

    async def _load_owned(
        self, board_id: BoardId, identity: SessionIdentity, lock: RowLock | None
    ) -> Board:
        """Load a board and check that the caller wrote it.

        Must be called inside a transaction.

        Raises:
            BoardNotFoundError: If the board does not exist
            ForbiddenError: If the caller is not the author
        """
        board = await self._board_repository.get_by_id(board_id, lock=lock)
        if board is None:
            raise BoardNotFoundError(f"Board {board_id} not found")

        try:
            ensure_owner(board.author.user_id, identity.user_id, f"board {board_id}")
        except ForbiddenError:
            self._probe.ownership_denied(
                board_id=board_id.value, caller_id=identity.user_id.value
            )
            raise
        return board

    async def create_board(
        self, title: str, body: str, caller: SessionIdentity | None
    ) -> Board:
        """Create a new board authored by the caller.

        Args:
            title: Board title
            body: Board body
            caller: The caller's session identity

        Returns:
            The created Board aggregate

        Raises:
            UnauthorizedError: If the caller is anonymous, or the session's
                user no longer exists
            ValidationError: If title or body is blank
        """
        identity = self._require(caller, "create_board")
        validate_board_content(title, body)

        try:
            async with self._session.begin():
                user = await self._user_repository.get_by_id(identity.user_id)
                if user is None:
                    raise UnauthorizedError("Session user no longer exists")

                board = Board.create(
                    title=title,
                    body=body,
                    author=Author(user_id=user.id, username=user.username),
                )
                await self._board_repository.save(board)

            self._probe.board_created(
                board_id=board.id.value, author_id=identity.user_id.value
            )
            return board

        except DomainError:
            raise
        except Exception as e:
            self._probe.board_creation_failed(
                author_id=identity.user_id.value, error=str(e)
            )
            raise

    async def list_boards(self, caller: SessionIdentity | None = None) -> list[BoardView]:
        """List every board, newest first, flagged for the caller.

        Args:
            caller: The viewer, or None when anonymous

        Returns:
            BoardView list; all flags False for an anonymous viewer
        """
        async with self._session.begin():
            boards = await self._board_repository.list_all()

        caller_id = caller.user_id if caller is not None else None
        return annotate_boards(boards, caller_id)

    async def get_board(self, board_id: BoardId) -> Board:
        """Load a single board.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        async with self._session.begin():
            board = await self._board_repository.get_by_id(board_id)

        if board is None:
            raise BoardNotFoundError(f"Board {board_id} not found")
        return board

    async def get_board_with_replies(
        self, board_id: BoardId, caller: SessionIdentity | None = None
    ) -> BoardView:
        """Load a board with its replies, flagged for the caller.

        Replies are listed newest first.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        async with self._session.begin():
            board = await self._board_repository.get_by_id(board_id)
            if board is None:
                raise BoardNotFoundError(f"Board {board_id} not found")
            replies = await self._reply_repository.list_by_board(board_id)

        caller_id = caller.user_id if caller is not None else None
        return annotate_board(board, caller_id, replies)

    async def check_owner(
        self, board_id: BoardId, caller: SessionIdentity | None
    ) -> None:
        """Pre-flight check that the caller may edit or delete a board.

        Raises:
            UnauthorizedError: If the caller is anonymous
            BoardNotFoundError: If the board does not exist
            ForbiddenError: If the caller is not the author
        """
        identity = self._require(caller, "check_owner")
        async with self._session.begin():
            await self._load_owned(board_id, identity, lock=None)

    async def update_board(
        self,
        board_id: BoardId,
        title: str,
        body: str,
        caller: SessionIdentity | None,
    ) -> Board:
        """Replace a board's title and body. Author and created_at never change.

        Args:
            board_id: The board to edit
            title: New title
            body: New body
            caller: The caller's session identity

        Returns:
            The updated Board aggregate

        Raises:
            UnauthorizedError: If the caller is anonymous
            ValidationError: If title or body is blank
            BoardNotFoundError: If the board does not exist
            ForbiddenError: If the caller is not the author
        """
        identity = self._require(caller, "update_board")
        validate_board_content(title, body)

        try:
            async with self._session.begin():
                board = await self._load_owned(board_id, identity, lock=RowLock.UPDATE)
                board.edit(title=title, body=body)
                await self._board_repository.save(board)

            self._probe.board_updated(
                board_id=board_id.value, author_id=identity.user_id.value
            )
            return board

        except DomainError:
            raise
        except Exception as e:
            self._probe.board_update_failed(board_id=board_id.value, error=str(e))
            raise

    async def delete_board(
        self, board_id: BoardId, caller: SessionIdentity | None
    ) -> None:
        """Delete a board and every reply under it in one transaction.

        If any step fails the whole transaction rolls back and the board
        and its replies are left intact.

        Raises:
            UnauthorizedError: If the caller is anonymous
            BoardNotFoundError: If the board does not exist
            ForbiddenError: If the caller is not the author
        """
        identity = self._require(caller, "delete_board")

        try:
            async with self._session.begin():
                await self._load_owned(board_id, identity, lock=RowLock.UPDATE)
                replies_deleted = await self._reply_repository.delete_by_board(board_id)
                await self._board_repository.delete(board_id)

            self._probe.board_deleted(
                board_id=board_id.value, replies_deleted=replies_deleted
            )

        except DomainError:
            raise
        except Exception as e:
            self._probe.board_deletion_failed(board_id=board_id.value, error=str(e))
            raise
