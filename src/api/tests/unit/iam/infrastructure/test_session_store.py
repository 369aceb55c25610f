"""Unit tests for CookieSessionStore."""

from unittest.mock import create_autospec

import pytest

from iam.application.observability import AuthenticationProbe
from iam.application.value_objects import SessionIdentity
from iam.domain.value_objects import UserId
from iam.infrastructure.session_store import SESSION_IDENTITY_KEY, CookieSessionStore
from iam.ports.session import ISessionStore


@pytest.fixture
def mock_probe():
    return create_autospec(AuthenticationProbe, instance=True)


@pytest.fixture
def session_data() -> dict:
    return {}


@pytest.fixture
def store(session_data, mock_probe) -> CookieSessionStore:
    return CookieSessionStore(session=session_data, probe=mock_probe)


def test_implements_protocol(store):
    assert isinstance(store, ISessionStore)


def test_empty_session_is_anonymous(store, mock_probe):
    assert store.get_current_identity() is None
    mock_probe.malformed_session.assert_not_called()


def test_set_then_get_returns_identity(store, session_data):
    identity = SessionIdentity(user_id=UserId.generate(), username="alice")

    store.set_current_identity(identity)

    assert session_data[SESSION_IDENTITY_KEY] == {
        "user_id": identity.user_id.value,
        "username": "alice",
    }
    assert store.get_current_identity() == identity


def test_clear_removes_identity(store, session_data):
    store.set_current_identity(
        SessionIdentity(user_id=UserId.generate(), username="alice")
    )
    session_data["other"] = "value"

    store.clear()

    assert session_data == {}
    assert store.get_current_identity() is None


@pytest.mark.parametrize(
    "payload,reason",
    [
        ("not-a-dict", "payload_not_a_mapping"),
        ({"username": "alice"}, "missing_fields"),
        ({"user_id": "01ARZ3NDEKTSV4RRFFQ69G5FAV", "username": ""}, "missing_fields"),
        ({"user_id": "not-a-ulid", "username": "alice"}, "invalid_user_id"),
    ],
)
def test_malformed_payload_resolves_to_anonymous(
    store, session_data, mock_probe, payload, reason
):
    session_data[SESSION_IDENTITY_KEY] = payload

    assert store.get_current_identity() is None
    mock_probe.malformed_session.assert_called_once_with(reason=reason)
