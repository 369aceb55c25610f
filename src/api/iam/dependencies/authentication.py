"""Session authentication dependencies.

Resolves the caller's identity from the signed session cookie. Routes that
accept anonymous callers depend on ``get_session_identity``; routes that
require sign-in depend on ``require_session_identity`` so the 401 fires
before any request body is validated by the core.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.services import AuthorizationGate
from iam.application.value_objects import SessionIdentity
from iam.infrastructure.session_store import CookieSessionStore
from shared_kernel.exceptions import UnauthorizedError


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance.

    Returns:
        DefaultAuthenticationProbe instance for observability
    """
    return DefaultAuthenticationProbe()


def get_session_store(
    request: Request,
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> CookieSessionStore:
    """Get the session store for the current request.

    Args:
        request: Incoming request carrying ``request.session``
        probe: Authentication probe for malformed-session events

    Returns:
        CookieSessionStore bound to this request's session
    """
    return CookieSessionStore(session=request.session, probe=probe)


def get_authorization_gate(
    store: Annotated[CookieSessionStore, Depends(get_session_store)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> AuthorizationGate:
    """Get the AuthorizationGate for the current request."""
    return AuthorizationGate(session_store=store, probe=probe)


def get_session_identity(
    gate: Annotated[AuthorizationGate, Depends(get_authorization_gate)],
) -> SessionIdentity | None:
    """Resolve the caller's identity, or None when anonymous."""
    return gate.current_identity()


def require_session_identity(
    gate: Annotated[AuthorizationGate, Depends(get_authorization_gate)],
) -> SessionIdentity:
    """Resolve the caller's identity and reject anonymous callers.

    Raises:
        HTTPException 401: If the session carries no identity
    """
    try:
        return gate.require()
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
