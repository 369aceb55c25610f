"""Aggregates for IAM domain."""

from iam.domain.aggregates.user import (
    MAX_CREDENTIAL_BYTES,
    MAX_EMAIL_LENGTH,
    MAX_USERNAME_LENGTH,
    User,
    validate_login,
    validate_profile_update,
    validate_registration,
)

__all__ = [
    "MAX_CREDENTIAL_BYTES",
    "MAX_EMAIL_LENGTH",
    "MAX_USERNAME_LENGTH",
    "User",
    "validate_login",
    "validate_profile_update",
    "validate_registration",
]
