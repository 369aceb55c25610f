"""Fixtures for board route tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from board.application.services import BoardService, ReplyService
from iam.application.value_objects import SessionIdentity


class CallerHolder:
    """Mutable slot for the identity the overridden dependency returns."""

    def __init__(self) -> None:
        self.identity: SessionIdentity | None = None


@pytest.fixture
def caller() -> CallerHolder:
    return CallerHolder()


@pytest.fixture
def mock_board_service() -> AsyncMock:
    """Mock BoardService for testing."""
    return AsyncMock(spec=BoardService)


@pytest.fixture
def mock_reply_service() -> AsyncMock:
    """Mock ReplyService for testing."""
    return AsyncMock(spec=ReplyService)


@pytest.fixture
def test_client(
    mock_board_service: AsyncMock,
    mock_reply_service: AsyncMock,
    caller: CallerHolder,
) -> TestClient:
    """Create TestClient with mocked services and a switchable caller."""
    from board.dependencies.board import get_board_query_service, get_board_service
    from board.dependencies.reply import get_reply_service
    from board.presentation import router
    from iam.dependencies.authentication import get_session_identity

    app = FastAPI()

    app.dependency_overrides[get_board_service] = lambda: mock_board_service
    app.dependency_overrides[get_board_query_service] = lambda: mock_board_service
    app.dependency_overrides[get_reply_service] = lambda: mock_reply_service
    app.dependency_overrides[get_session_identity] = lambda: caller.identity

    app.include_router(router)

    return TestClient(app)
