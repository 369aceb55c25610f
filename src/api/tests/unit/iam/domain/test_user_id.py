"""Unit tests for the UserId value object."""

import pytest

from iam.domain.value_objects import UserId


def test_generate_produces_valid_ulid():
    user_id = UserId.generate()

    assert UserId.from_string(user_id.value) == user_id


def test_str_returns_value():
    user_id = UserId.generate()

    assert str(user_id) == user_id.value


def test_from_string_rejects_invalid_ulid():
    with pytest.raises(ValueError, match="Invalid UserId"):
        UserId.from_string("not-a-ulid")


def test_is_immutable():
    user_id = UserId.generate()

    with pytest.raises(Exception):
        user_id.value = "other"
