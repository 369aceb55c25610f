"""Fixtures for IAM route tests.

The app under test runs the real session middleware and authorization gate;
only the user service is replaced.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.middleware.sessions import SessionMiddleware

from iam.application.services import UserService
from iam.domain.aggregates import User
from iam.domain.value_objects import UserId


@pytest.fixture
def mock_user_service() -> AsyncMock:
    """Mock UserService for testing."""
    return AsyncMock(spec=UserService)


@pytest.fixture
def registered_user() -> User:
    return User(
        id=UserId.generate(),
        username="alice",
        credential_hash="hash",
        email="alice@example.com",
    )


@pytest.fixture
def test_client(mock_user_service: AsyncMock) -> TestClient:
    """Create TestClient with a mocked user service."""
    from iam.dependencies.user import get_user_query_service, get_user_service
    from iam.presentation import router

    app = FastAPI()
    app.add_middleware(SessionMiddleware, secret_key="test-secret")

    app.dependency_overrides[get_user_service] = lambda: mock_user_service
    app.dependency_overrides[get_user_query_service] = lambda: mock_user_service

    app.include_router(router)

    return TestClient(app)
