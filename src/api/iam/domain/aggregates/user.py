"""User aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from iam.domain.value_objects import UserId
from shared_kernel.exceptions import ValidationError

MIN_CREDENTIAL_LENGTH = 4
# bcrypt only reads the first 72 bytes of its input
MAX_CREDENTIAL_BYTES = 72
MAX_USERNAME_LENGTH = 255
MAX_EMAIL_LENGTH = 320


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _credential_too_long(raw_credential: str) -> bool:
    return len(raw_credential.encode("utf-8")) > MAX_CREDENTIAL_BYTES


def _email_error(email: str | None) -> str | None:
    if email is None or "@" not in email:
        return "Email address is not valid"
    if len(email.strip()) > MAX_EMAIL_LENGTH:
        return f"Email address must be at most {MAX_EMAIL_LENGTH} characters"
    return None


def validate_registration(
    username: str | None, raw_credential: str | None, email: str | None
) -> None:
    """Check sign-up input before anything is hashed or stored.

    Raises:
        ValidationError: Listing every field that failed
    """
    errors: dict[str, str] = {}
    if _is_blank(username):
        errors["username"] = "Username is required"
    elif len(username.strip()) > MAX_USERNAME_LENGTH:
        errors["username"] = (
            f"Username must be at most {MAX_USERNAME_LENGTH} characters"
        )
    if _is_blank(raw_credential):
        errors["password"] = "Password is required"
    elif _credential_too_long(raw_credential):
        errors["password"] = f"Password must be at most {MAX_CREDENTIAL_BYTES} bytes"
    email_error = _email_error(email)
    if email_error:
        errors["email"] = email_error
    if errors:
        raise ValidationError(errors)


def validate_login(username: str | None, raw_credential: str | None) -> None:
    """Check sign-in input before the user is looked up.

    Raises:
        ValidationError: Listing every field that failed
    """
    errors: dict[str, str] = {}
    if _is_blank(username):
        errors["username"] = "Enter your username"
    if _is_blank(raw_credential):
        errors["password"] = "Enter your password"
    if errors:
        raise ValidationError(errors)


def validate_profile_update(
    raw_credential: str | None, email: str | None
) -> None:
    """Check profile edit input.

    Raises:
        ValidationError: Listing every field that failed
    """
    errors: dict[str, str] = {}
    if _is_blank(raw_credential):
        errors["password"] = "Password is required"
    elif len(raw_credential) < MIN_CREDENTIAL_LENGTH:
        errors["password"] = (
            f"Password must be at least {MIN_CREDENTIAL_LENGTH} characters"
        )
    elif _credential_too_long(raw_credential):
        errors["password"] = f"Password must be at most {MAX_CREDENTIAL_BYTES} bytes"
    email_error = _email_error(email)
    if email_error:
        errors["email"] = email_error
    if errors:
        raise ValidationError(errors)


@dataclass
class User:
    """User aggregate representing a registered account.

    The username is the sign-in handle and never changes after registration.
    Only the credential hash and email are editable, through
    ``change_profile``. The raw credential never reaches the aggregate; it
    only ever holds the verifier's opaque hash.
    """

    id: UserId
    username: str
    credential_hash: str
    email: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def register(cls, username: str, credential_hash: str, email: str) -> User:
        """Factory method for a newly registered user.

        Input must already have passed ``validate_registration``.

        Args:
            username: Unique sign-in handle
            credential_hash: Hash produced by the credential verifier
            email: Contact address

        Returns:
            A new User aggregate with a fresh ID
        """
        return cls(
            id=UserId.generate(),
            username=username.strip(),
            credential_hash=credential_hash,
            email=email.strip(),
        )

    def change_profile(self, credential_hash: str, email: str) -> None:
        """Replace the stored credential hash and email.

        Args:
            credential_hash: Hash of the new credential
            email: New contact address
        """
        self.credential_hash = credential_hash
        self.email = email.strip()

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.username})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
