"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import SecretStr

from iam.application.value_objects import SessionIdentity
from iam.domain.value_objects import UserId


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password=SecretStr("testpass"),
    )


@pytest.fixture
def mock_session():
    """Create mock async session with transaction support."""
    session = AsyncMock()
    # Mock transaction context manager properly
    mock_transaction = MagicMock()
    mock_transaction.__aenter__ = AsyncMock(return_value=None)
    mock_transaction.__aexit__ = AsyncMock(return_value=None)
    session.begin = MagicMock(return_value=mock_transaction)
    return session


@pytest.fixture
def alice() -> SessionIdentity:
    """Signed-in identity for user alice."""
    return SessionIdentity(user_id=UserId.generate(), username="alice")


@pytest.fixture
def bob() -> SessionIdentity:
    """Signed-in identity for user bob."""
    return SessionIdentity(user_id=UserId.generate(), username="bob")
