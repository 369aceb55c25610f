"""FastAPI providers for the identity store.

Write routes (register, login, profile edit) get a ``UserService`` on the
write session; ``/users/me`` reads through the read session.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    AuthenticationProbe,
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from iam.application.security import BcryptCredentialVerifier
from iam.application.services import UserService
from iam.dependencies.authentication import get_authentication_probe
from iam.infrastructure.user_repository import UserRepository
from iam.ports.credentials import ICredentialVerifier
from infrastructure.database.dependencies import get_read_session, get_write_session

WriteSession = Annotated[AsyncSession, Depends(get_write_session)]
ReadSession = Annotated[AsyncSession, Depends(get_read_session)]


def get_user_service_probe() -> UserServiceProbe:
    return DefaultUserServiceProbe()


@lru_cache
def get_credential_verifier() -> ICredentialVerifier:
    """One bcrypt verifier per process, at the production cost factor."""
    return BcryptCredentialVerifier()


Verifier = Annotated[ICredentialVerifier, Depends(get_credential_verifier)]


def get_user_repository(session: WriteSession) -> UserRepository:
    return UserRepository(session=session)


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    session: WriteSession,
    verifier: Verifier,
    probe: Annotated[UserServiceProbe, Depends(get_user_service_probe)],
    auth_probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> UserService:
    """Service for register, login and profile edits.

    FastAPI caches ``get_write_session`` per request, so the repository and
    the service share one session and one transaction.
    """
    return UserService(
        user_repository=user_repo,
        credential_verifier=verifier,
        session=session,
        probe=probe,
        authentication_probe=auth_probe,
    )


def get_user_query_service(
    session: ReadSession,
    verifier: Verifier,
    probe: Annotated[UserServiceProbe, Depends(get_user_service_probe)],
) -> UserService:
    """Service bound to the read session, for loading a profile."""
    return UserService(
        user_repository=UserRepository(session=session),
        credential_verifier=verifier,
        session=session,
        probe=probe,
    )
