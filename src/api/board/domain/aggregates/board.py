"""Board aggregate for the board context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from board.domain.value_objects import Author, BoardId
from shared_kernel.exceptions import ValidationError

MAX_TITLE_LENGTH = 255


def validate_board_content(title: str | None, body: str | None) -> None:
    """Check that title and body are both present and the title fits.

    Raises:
        ValidationError: Listing every invalid field
    """
    errors: dict[str, str] = {}
    if title is None or not title.strip():
        errors["title"] = "Title is required"
    elif len(title.strip()) > MAX_TITLE_LENGTH:
        errors["title"] = f"Title must be at most {MAX_TITLE_LENGTH} characters"
    if body is None or not body.strip():
        errors["body"] = "Content is required"
    if errors:
        raise ValidationError(errors)


@dataclass
class Board:
    """A post authored by one user.

    The author and creation time are fixed at creation. Only title and body
    change, through ``edit``, and only after the caller has been checked
    against ``author``. A board holds no reply collection; replies point at
    their board.
    """

    id: BoardId
    author: Author
    title: str
    body: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, title: str, body: str, author: Author) -> Board:
        """Factory method for creating a new board.

        Args:
            title: Board title, already validated
            body: Board body, already validated
            author: The creating user

        Returns:
            A new Board aggregate with a fresh ID
        """
        return cls(
            id=BoardId.generate(),
            author=author,
            title=title.strip(),
            body=body,
        )

    def edit(self, title: str, body: str) -> None:
        """Replace title and body.

        Args:
            title: New title, already validated
            body: New body, already validated
        """
        self.title = title.strip()
        self.body = body

    def __eq__(self, other: object) -> bool:
        """Boards are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, Board):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
