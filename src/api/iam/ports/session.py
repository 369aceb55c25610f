"""Session store port.

The authorization gate reads and writes the caller's identity through this
port so that the core does not depend on cookies or any particular web
framework.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from iam.application.value_objects import SessionIdentity


@runtime_checkable
class ISessionStore(Protocol):
    """Per-request access to the identity bound to the client session."""

    def get_current_identity(self) -> SessionIdentity | None:
        """Return the bound identity, or None when the session is anonymous."""
        ...

    def set_current_identity(self, identity: SessionIdentity) -> None:
        """Bind an identity to the session."""
        ...

    def clear(self) -> None:
        """Remove any bound identity from the session."""
        ...
