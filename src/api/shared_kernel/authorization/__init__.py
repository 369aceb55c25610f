"""Authorization primitives shared across bounded contexts.

Ownership is the only authority in this system: a user may modify exactly
the boards and replies they authored. There are no roles and no moderation.
"""

from shared_kernel.authorization.gate import require_identity
from shared_kernel.authorization.ownership import ensure_owner, is_owner

__all__ = [
    "ensure_owner",
    "is_owner",
    "require_identity",
]
