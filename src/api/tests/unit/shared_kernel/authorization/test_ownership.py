"""Unit tests for the ownership predicates."""

import pytest

from iam.domain.value_objects import UserId
from shared_kernel.authorization import ensure_owner, is_owner
from shared_kernel.exceptions import ForbiddenError


class TestIsOwner:
    """Tests for is_owner."""

    def test_same_id_is_owner(self):
        owner = UserId.generate()
        assert is_owner(owner, UserId(value=owner.value)) is True

    def test_different_id_is_not_owner(self):
        assert is_owner(UserId.generate(), UserId.generate()) is False

    def test_anonymous_caller_is_never_owner(self):
        assert is_owner(UserId.generate(), None) is False


class TestEnsureOwner:
    """Tests for ensure_owner."""

    def test_owner_passes(self):
        owner = UserId.generate()
        ensure_owner(owner, owner, "board 1")

    def test_non_owner_is_forbidden(self):
        with pytest.raises(ForbiddenError) as exc_info:
            ensure_owner(UserId.generate(), UserId.generate(), "board 01ABC")

        assert "board 01ABC" in str(exc_info.value)

    def test_anonymous_caller_is_forbidden(self):
        """ensure_owner alone does not distinguish anonymous; the gate does."""
        with pytest.raises(ForbiddenError):
            ensure_owner(UserId.generate(), None, "reply 1")

    def test_forbidden_is_a_permission_error(self):
        with pytest.raises(PermissionError):
            ensure_owner(UserId.generate(), UserId.generate(), "board 1")
