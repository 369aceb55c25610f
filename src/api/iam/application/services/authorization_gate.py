"""Authorization gate for the current client session.

The gate has two states. A session is Anonymous until ``sign_in`` binds an
identity to it, and Authenticated until ``sign_out`` clears it. There is no
timeout here; cookie expiry belongs to the session middleware.
"""

from __future__ import annotations

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.value_objects import SessionIdentity
from iam.domain.aggregates import User
from iam.ports.session import ISessionStore
from shared_kernel.authorization import require_identity
from shared_kernel.exceptions import UnauthorizedError


class AuthorizationGate:
    """Resolves and changes the identity bound to one client session."""

    def __init__(
        self,
        session_store: ISessionStore,
        probe: AuthenticationProbe | None = None,
    ):
        self._session_store = session_store
        self._probe = probe or DefaultAuthenticationProbe()

    def current_identity(self) -> SessionIdentity | None:
        """Return the caller's identity, or None when anonymous."""
        return self._session_store.get_current_identity()

    def require(self) -> SessionIdentity:
        """Return the caller's identity.

        Raises:
            UnauthorizedError: If the session is anonymous
        """
        try:
            return require_identity(self.current_identity())
        except UnauthorizedError:
            self._probe.anonymous_access_denied()
            raise

    def sign_in(self, user: User) -> SessionIdentity:
        """Bind a freshly registered or authenticated user to the session.

        Any identity previously bound to the session is replaced.

        Args:
            user: The user returned by register or authenticate

        Returns:
            The identity now bound to the session
        """
        identity = SessionIdentity(user_id=user.id, username=user.username)
        self._session_store.clear()
        self._session_store.set_current_identity(identity)
        self._probe.session_started(
            user_id=identity.user_id.value, username=identity.username
        )
        return identity

    def sign_out(self) -> None:
        """Clear the session. Signing out an anonymous session is a no-op."""
        identity = self.current_identity()
        self._session_store.clear()
        self._probe.session_ended(
            user_id=identity.user_id.value if identity is not None else None
        )
