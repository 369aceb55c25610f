"""Ownership predicates.

Pure functions answering "does this caller own that entity". Every mutating
Board/Reply operation and the view projection go through these, so the
ownership rule is defined exactly once.
"""

from __future__ import annotations

from typing import Hashable, TypeVar

from shared_kernel.exceptions import ForbiddenError

IdT = TypeVar("IdT", bound=Hashable)


def is_owner(owner_id: IdT, caller_id: IdT | None) -> bool:
    """Check whether the caller is the owner of an entity.

    Args:
        owner_id: Identifier of the entity's owning user
        caller_id: Identifier of the calling user, or None when anonymous

    Returns:
        True only if the caller is present and equal to the owner
    """
    if caller_id is None:
        return False
    return owner_id == caller_id


def ensure_owner(owner_id: IdT, caller_id: IdT | None, resource: str) -> None:
    """Raise ForbiddenError unless the caller owns the entity.

    Args:
        owner_id: Identifier of the entity's owning user
        caller_id: Identifier of the calling user, or None when anonymous
        resource: Resource description used in the error message (e.g. "board 01H...")

    Raises:
        ForbiddenError: If the caller is not the owner
    """
    if not is_owner(owner_id, caller_id):
        raise ForbiddenError(f"Only the author may modify {resource}")
