"""Error taxonomy shared by all bounded contexts.

Every failure the core can report is one of these explicit kinds. The
presentation layer maps each kind to a distinct HTTP status; nothing here is
retried automatically.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected, caller-visible failures."""

    pass


class ValidationError(DomainError, ValueError):
    """Raised when input is missing or malformed.

    Carries field-level messages so callers can render them next to the
    offending inputs.

    Attributes:
        field_errors: Mapping of field name to a human readable message
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__(
            "; ".join(f"{name}: {message}" for name, message in self.field_errors.items())
        )


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    pass


class UnauthorizedError(DomainError):
    """Raised when an operation requires an authenticated identity and none is present.

    Distinct from ForbiddenError so callers can redirect to sign-in instead
    of reporting a policy denial.
    """

    pass


class ForbiddenError(DomainError, PermissionError):
    """Raised when the authenticated identity does not own the target entity.

    Never downgraded to NotFoundError.
    """

    pass
