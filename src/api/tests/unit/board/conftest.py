"""Fixtures for board context tests.

Provides in-memory repositories sharing one store, and a session whose
``begin()`` restores the store when the block raises. Together they behave
like a single database with transactional rollback, which is enough to
check the integrity rules end to end without PostgreSQL.
"""

from __future__ import annotations

import copy
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import pytest

from board.application.services import BoardService, ReplyService
from board.domain.aggregates import Board, Reply
from board.domain.value_objects import Author, BoardId, ReplyId
from board.ports.repositories import RowLock
from iam.application.security import BcryptCredentialVerifier
from iam.application.services import UserService
from iam.application.value_objects import SessionIdentity
from iam.domain.aggregates import User
from iam.domain.value_objects import UserId
from iam.ports.exceptions import DuplicateUsernameError


@dataclass
class InMemoryStore:
    """Rows keyed by identifier value."""

    users: dict[str, User] = field(default_factory=dict)
    boards: dict[str, Board] = field(default_factory=dict)
    replies: dict[str, Reply] = field(default_factory=dict)

    def snapshot(self) -> InMemoryStore:
        return copy.deepcopy(self)

    def restore(self, snapshot: InMemoryStore) -> None:
        self.users = snapshot.users
        self.boards = snapshot.boards
        self.replies = snapshot.replies


class InMemorySession:
    """Stands in for AsyncSession.begin() over an InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @asynccontextmanager
    async def begin(self):
        snapshot = self._store.snapshot()
        try:
            yield self
        except BaseException:
            self._store.restore(snapshot)
            raise


class InMemoryUserRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, user: User) -> None:
        for existing in self._store.users.values():
            if existing.username == user.username and existing.id != user.id:
                raise DuplicateUsernameError(f"Username '{user.username}' is already taken")
        self._store.users[user.id.value] = copy.deepcopy(user)

    async def get_by_id(self, user_id: UserId) -> User | None:
        user = self._store.users.get(user_id.value)
        return copy.deepcopy(user) if user is not None else None

    async def get_by_username(self, username: str) -> User | None:
        for user in self._store.users.values():
            if user.username == username:
                return copy.deepcopy(user)
        return None


class InMemoryBoardRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self.locks: list[tuple[str, RowLock | None]] = []

    async def save(self, board: Board) -> None:
        if board.author.user_id.value not in self._store.users:
            raise RuntimeError("foreign key violation: boards.author_id")
        self._store.boards[board.id.value] = copy.deepcopy(board)

    async def get_by_id(
        self, board_id: BoardId, lock: RowLock | None = None
    ) -> Board | None:
        self.locks.append((board_id.value, lock))
        board = self._store.boards.get(board_id.value)
        return copy.deepcopy(board) if board is not None else None

    async def list_all(self) -> list[Board]:
        return [
            copy.deepcopy(board)
            for _, board in sorted(self._store.boards.items(), reverse=True)
        ]

    async def delete(self, board_id: BoardId) -> bool:
        if board_id.value not in self._store.boards:
            return False
        if any(r.board_id == board_id for r in self._store.replies.values()):
            raise RuntimeError("foreign key violation: replies.board_id")
        del self._store.boards[board_id.value]
        return True


class InMemoryReplyRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, reply: Reply) -> None:
        if reply.board_id.value not in self._store.boards:
            raise RuntimeError("foreign key violation: replies.board_id")
        self._store.replies[reply.id.value] = reply

    async def get_by_id(
        self, reply_id: ReplyId, lock: RowLock | None = None
    ) -> Reply | None:
        return self._store.replies.get(reply_id.value)

    async def list_by_board(self, board_id: BoardId) -> list[Reply]:
        return [
            reply
            for _, reply in sorted(self._store.replies.items(), reverse=True)
            if reply.board_id == board_id
        ]

    async def delete(self, reply_id: ReplyId) -> bool:
        return self._store.replies.pop(reply_id.value, None) is not None

    async def delete_by_board(self, board_id: BoardId) -> int:
        doomed = [key for key, r in self._store.replies.items() if r.board_id == board_id]
        for key in doomed:
            del self._store.replies[key]
        return len(doomed)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def memory_session(store) -> InMemorySession:
    return InMemorySession(store)


@pytest.fixture
def user_repository(store) -> InMemoryUserRepository:
    return InMemoryUserRepository(store)


@pytest.fixture
def board_repository(store) -> InMemoryBoardRepository:
    return InMemoryBoardRepository(store)


@pytest.fixture
def reply_repository(store) -> InMemoryReplyRepository:
    return InMemoryReplyRepository(store)


@pytest.fixture
def user_service(user_repository, memory_session) -> UserService:
    return UserService(
        user_repository=user_repository,
        credential_verifier=BcryptCredentialVerifier(rounds=4),
        session=memory_session,
    )


@pytest.fixture
def board_service(
    memory_session, board_repository, reply_repository, user_repository
) -> BoardService:
    return BoardService(
        session=memory_session,
        board_repository=board_repository,
        reply_repository=reply_repository,
        user_repository=user_repository,
    )


@pytest.fixture
def reply_service(memory_session, reply_repository, board_repository) -> ReplyService:
    return ReplyService(
        session=memory_session,
        reply_repository=reply_repository,
        board_repository=board_repository,
    )


@pytest.fixture
def make_board():
    """Build a Board aggregate authored by the given identity."""

    def _make(identity: SessionIdentity, title: str = "Hello", body: str = "World") -> Board:
        return Board.create(
            title=title,
            body=body,
            author=Author(user_id=identity.user_id, username=identity.username),
        )

    return _make
