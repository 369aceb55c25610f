"""Cookie-backed session store.

Wraps Starlette's ``request.session`` (populated by ``SessionMiddleware``)
behind the ISessionStore port. The cookie is signed, so a client cannot forge
an identity, but a payload written by an older release or under a rotated
key may still be shaped wrongly; those resolve to anonymous.
"""

from __future__ import annotations

from typing import Any, MutableMapping

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.value_objects import SessionIdentity
from iam.domain.value_objects import UserId
from iam.ports.session import ISessionStore

SESSION_IDENTITY_KEY = "identity"


class CookieSessionStore(ISessionStore):
    """ISessionStore over a mutable session mapping."""

    def __init__(
        self,
        session: MutableMapping[str, Any],
        probe: AuthenticationProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultAuthenticationProbe()

    def get_current_identity(self) -> SessionIdentity | None:
        payload = self._session.get(SESSION_IDENTITY_KEY)
        if payload is None:
            return None

        if not isinstance(payload, dict):
            self._probe.malformed_session(reason="payload_not_a_mapping")
            return None

        user_id = payload.get("user_id")
        username = payload.get("username")
        if not isinstance(user_id, str) or not isinstance(username, str) or not username:
            self._probe.malformed_session(reason="missing_fields")
            return None

        try:
            return SessionIdentity(
                user_id=UserId.from_string(user_id), username=username
            )
        except ValueError:
            self._probe.malformed_session(reason="invalid_user_id")
            return None

    def set_current_identity(self, identity: SessionIdentity) -> None:
        self._session[SESSION_IDENTITY_KEY] = {
            "user_id": identity.user_id.value,
            "username": identity.username,
        }

    def clear(self) -> None:
        self._session.clear()
