"""Authentication gate predicate.

Application services call ``require_identity`` as their first step so that an
anonymous caller is rejected with UnauthorizedError before any validation,
lookup, or ownership check runs.
"""

from __future__ import annotations

from typing import TypeVar

from shared_kernel.exceptions import UnauthorizedError

IdentityT = TypeVar("IdentityT")


def require_identity(identity: IdentityT | None) -> IdentityT:
    """Return the identity, or raise if the caller is anonymous.

    Args:
        identity: The resolved session identity, or None

    Returns:
        The same identity, narrowed to non-None

    Raises:
        UnauthorizedError: If identity is None
    """
    if identity is None:
        raise UnauthorizedError("Authentication required")
    return identity
