"""ULID-backed identifiers shared by every aggregate.

A ULID sorts by creation time, so "newest first" is a descending sort on the
identifier column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from ulid import ULID

_IdT = TypeVar("_IdT", bound="UlidIdentifier")


@dataclass(frozen=True)
class UlidIdentifier:
    """Immutable wrapper around a ULID string.

    Subclasses only name the aggregate they identify. Identifiers of
    different subclasses never compare equal, even with the same value.
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls: type[_IdT]) -> _IdT:
        """Mint a fresh identifier for a new aggregate."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls: type[_IdT], value: str) -> _IdT:
        """Parse an identifier taken from a URL or the session cookie.

        Raises:
            ValueError: If ``value`` is not a ULID; the message names the
                identifier type, e.g. ``Invalid BoardId: abc``
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid {cls.__name__}: {value}") from e

        return cls(value=value)
