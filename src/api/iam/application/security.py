"""Credential hashing for user accounts.

Uses bcrypt with automatic salt generation, so two users with the same
password still store different hashes.
"""

import secrets
from functools import lru_cache

import bcrypt


@lru_cache(maxsize=None)
def _placeholder_hash(rounds: int) -> str:
    # Random secret nobody knows, so checks against it never match
    secret = secrets.token_urlsafe(32).encode()
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds)).decode()


class BcryptCredentialVerifier:
    """ICredentialVerifier implementation backed by bcrypt.

    Input longer than 72 bytes is rejected by ``hashpw``; account validation
    keeps such passwords from reaching the verifier.
    """

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, raw_credential: str) -> str:
        """Hash a credential with a fresh salt at the configured cost."""
        return bcrypt.hashpw(
            raw_credential.encode(), bcrypt.gensalt(rounds=self._rounds)
        ).decode()

    def verify(self, raw_credential: str, credential_hash: str) -> bool:
        """Check a credential against a stored bcrypt hash.

        Returns:
            True if the credential matches; False on mismatch or a hash
            bcrypt cannot parse
        """
        try:
            return bcrypt.checkpw(raw_credential.encode(), credential_hash.encode())
        except ValueError:
            return False

    def placeholder_hash(self) -> str:
        """Return a hash at this verifier's cost that matches no credential.

        Computed once per cost factor and reused.
        """
        return _placeholder_hash(self._rounds)
