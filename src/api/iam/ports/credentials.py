"""Credential verifier port.

The identity store never sees how credentials are hashed; it only calls the
verifier it was given.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ICredentialVerifier(Protocol):
    """Hashes new credentials and checks presented ones against stored hashes."""

    def hash(self, raw_credential: str) -> str:
        """Return an opaque hash suitable for storage."""
        ...

    def verify(self, raw_credential: str, credential_hash: str) -> bool:
        """Return True if the raw credential matches the stored hash.

        Must never raise for a malformed hash; such hashes simply do not match.
        """
        ...

    def placeholder_hash(self) -> str:
        """Return a hash that no credential matches, at the same cost as real ones.

        Checking against it lets a failed lookup take as long as a failed match.
        """
        ...
