"""Unit tests for the per-viewer projection."""

import pytest

from board.application.projection import (
    annotate_board,
    annotate_boards,
    annotate_reply,
)
from board.domain.aggregates import Reply
from board.domain.value_objects import Author


@pytest.fixture
def alice_board(make_board, alice):
    return make_board(alice)


@pytest.fixture
def bob_reply(alice_board, bob):
    return Reply.create(
        board_id=alice_board.id,
        author=Author(user_id=bob.user_id, username=bob.username),
        comment="Nice",
    )


def test_author_sees_owner_flag(alice_board, alice):
    assert annotate_board(alice_board, alice.user_id).is_owner is True


def test_other_user_does_not_see_owner_flag(alice_board, bob):
    assert annotate_board(alice_board, bob.user_id).is_owner is False


def test_anonymous_viewer_sees_no_flags(alice_board, bob_reply):
    view = annotate_board(alice_board, None, [bob_reply])

    assert view.is_owner is False
    assert all(not reply.is_owner for reply in view.replies)


def test_reply_flags_are_per_reply_author(alice_board, bob_reply, alice, bob):
    as_alice = annotate_board(alice_board, alice.user_id, [bob_reply])
    as_bob = annotate_board(alice_board, bob.user_id, [bob_reply])

    assert as_alice.replies[0].is_owner is False
    assert as_bob.is_owner is False
    assert as_bob.replies[0].is_owner is True


def test_reply_count_matches_replies(alice_board, bob_reply):
    assert annotate_board(alice_board, None).reply_count == 0
    assert annotate_board(alice_board, None, [bob_reply]).reply_count == 1


def test_annotate_reply(bob_reply, bob):
    view = annotate_reply(bob_reply, bob.user_id)

    assert view.reply is bob_reply
    assert view.is_owner is True


def test_annotate_boards_preserves_order(make_board, alice, bob):
    boards = [make_board(alice, title="first"), make_board(bob, title="second")]

    views = annotate_boards(boards, alice.user_id)

    assert [view.board.title for view in views] == ["first", "second"]
    assert [view.is_owner for view in views] == [True, False]


def test_projection_does_not_touch_aggregate(alice_board, alice):
    annotate_board(alice_board, alice.user_id)

    assert not hasattr(alice_board, "is_owner")
