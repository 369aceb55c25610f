"""Ports (interfaces) for IAM bounded context.

Ports define the contracts for repositories and collaborators without
specifying implementation details. This allows for dependency inversion
and makes the domain layer independent of infrastructure.
"""

from iam.ports.credentials import ICredentialVerifier
from iam.ports.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from iam.ports.repositories import IUserRepository
from iam.ports.session import ISessionStore

__all__ = [
    "DuplicateUsernameError",
    "ICredentialVerifier",
    "ISessionStore",
    "IUserRepository",
    "InvalidCredentialsError",
    "UserNotFoundError",
]
