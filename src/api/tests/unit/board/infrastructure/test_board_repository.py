"""Unit tests for BoardRepository with a mocked async session."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest
from sqlalchemy.dialects import postgresql

from board.domain.aggregates import Board
from board.domain.value_objects import Author, BoardId
from board.infrastructure.board_repository import BoardRepository
from board.infrastructure.models import BoardModel
from board.infrastructure.observability import BoardRepositoryProbe
from board.ports.repositories import IBoardRepository, RowLock
from iam.domain.value_objects import UserId


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_probe():
    return create_autospec(BoardRepositoryProbe, instance=True)


@pytest.fixture
def repository(mock_session, mock_probe):
    return BoardRepository(session=mock_session, probe=mock_probe)


@pytest.fixture
def board() -> Board:
    return Board.create(
        title="Hello",
        body="World",
        author=Author(user_id=UserId.generate(), username="alice"),
    )


def _model_for(board: Board) -> BoardModel:
    return BoardModel(
        id=board.id.value,
        author_id=board.author.user_id.value,
        title=board.title,
        body=board.body,
        created_at=board.created_at,
    )


def _executed_sql(mock_session) -> str:
    stmt = mock_session.execute.call_args[0][0]
    return str(stmt.compile(dialect=postgresql.dialect()))


def test_implements_protocol(repository):
    assert isinstance(repository, IBoardRepository)


class TestSave:
    @pytest.mark.asyncio
    async def test_inserts_new_board(self, repository, mock_session, board):
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        mock_session.execute.return_value = result

        await repository.save(board)

        added = mock_session.add.call_args[0][0]
        assert isinstance(added, BoardModel)
        assert added.author_id == board.author.user_id.value
        assert added.title == "Hello"
        mock_session.flush.assert_awaited_once()
        mock_session.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_updates_title_and_body_but_not_author(
        self, repository, mock_session, board
    ):
        existing = _model_for(board)
        result = MagicMock()
        result.scalar_one_or_none.return_value = existing
        mock_session.execute.return_value = result
        board.edit(title="New", body="New body")

        await repository.save(board)

        mock_session.add.assert_not_called()
        assert existing.title == "New"
        assert existing.body == "New body"
        assert existing.author_id == board.author.user_id.value


class TestGetById:
    @pytest.mark.asyncio
    async def test_returns_board_with_author_username(
        self, repository, mock_session, board
    ):
        result = MagicMock()
        result.one_or_none.return_value = (_model_for(board), "alice")
        mock_session.execute.return_value = result

        loaded = await repository.get_by_id(board.id)

        assert loaded == board
        assert loaded.author == board.author
        assert loaded.title == "Hello"

    @pytest.mark.asyncio
    async def test_returns_none_when_missing(self, repository, mock_session, mock_probe):
        result = MagicMock()
        result.one_or_none.return_value = None
        mock_session.execute.return_value = result
        board_id = BoardId.generate()

        assert await repository.get_by_id(board_id) is None
        mock_probe.board_not_found.assert_called_once_with(board_id.value)

    @pytest.mark.asyncio
    async def test_plain_read_takes_no_lock(self, repository, mock_session):
        result = MagicMock()
        result.one_or_none.return_value = None
        mock_session.execute.return_value = result

        await repository.get_by_id(BoardId.generate())

        assert "FOR " not in _executed_sql(mock_session)

    @pytest.mark.asyncio
    async def test_update_lock_is_applied(self, repository, mock_session, board):
        result = MagicMock()
        result.one_or_none.return_value = (_model_for(board), "alice")
        mock_session.execute.return_value = result

        await repository.get_by_id(board.id, lock=RowLock.UPDATE)

        assert "FOR UPDATE OF boards" in _executed_sql(mock_session)


class TestListAll:
    @pytest.mark.asyncio
    async def test_orders_newest_first(self, repository, mock_session, board, mock_probe):
        result = MagicMock()
        result.all.return_value = [(_model_for(board), "alice")]
        mock_session.execute.return_value = result

        boards = await repository.list_all()

        assert boards == [board]
        assert "ORDER BY boards.id DESC" in _executed_sql(mock_session)
        mock_probe.boards_listed.assert_called_once_with(1)


class TestDelete:
    @pytest.mark.asyncio
    async def test_returns_true_when_row_removed(self, repository, mock_session):
        mock_session.execute.return_value = MagicMock(rowcount=1)

        assert await repository.delete(BoardId.generate()) is True

    @pytest.mark.asyncio
    async def test_returns_false_when_missing(self, repository, mock_session):
        mock_session.execute.return_value = MagicMock(rowcount=0)

        assert await repository.delete(BoardId.generate()) is False


def test_created_at_is_carried_through(repository):
    created = datetime(2024, 1, 2, 3, 4, tzinfo=timezone.utc)
    model = BoardModel(
        id=BoardId.generate().value,
        author_id=UserId.generate().value,
        title="t",
        body="b",
        created_at=created,
    )

    assert repository._to_aggregate(model, "alice").created_at == created
