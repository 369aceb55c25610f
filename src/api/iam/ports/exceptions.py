"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors that can occur during
repository and service operations. The presentation layer maps each one
to an HTTP status.
"""

from shared_kernel.exceptions import DomainError, NotFoundError


class DuplicateUsernameError(DomainError):
    """Raised when attempting to register a username that is already taken.

    Covers both the explicit pre-check and the unique index violation
    detected on flush when two registrations race.
    """

    pass


class InvalidCredentialsError(DomainError):
    """Raised when sign-in fails.

    Carries the same message whether the username is unknown or the
    credential is wrong, so callers cannot probe for existing accounts.
    """

    def __init__(self, message: str = "Username or password is incorrect"):
        super().__init__(message)


class UserNotFoundError(NotFoundError):
    """Raised when a user cannot be found by ID."""

    pass
