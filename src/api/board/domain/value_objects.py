"""Value objects for the board domain."""

from __future__ import annotations

from dataclasses import dataclass

from iam.domain.value_objects import UserId
from shared_kernel.identifiers import UlidIdentifier


class BoardId(UlidIdentifier):
    """Identifier of a board; also the key replies point at."""


class ReplyId(UlidIdentifier):
    """Identifier of a reply."""


@dataclass(frozen=True)
class Author:
    """The owning user of a board or reply.

    ``user_id`` is the ownership key. ``username`` is carried for display;
    usernames never change, so the copy cannot go stale.
    """

    user_id: UserId
    username: str
