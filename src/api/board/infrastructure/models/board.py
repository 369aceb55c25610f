"""SQLAlchemy ORM model for the boards table."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class BoardModel(Base, TimestampMixin):
    """ORM model for boards table.

    ``author_id`` references users with RESTRICT; a user who still owns
    boards cannot be removed.
    """

    __tablename__ = "boards"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    author_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<BoardModel(id={self.id}, author_id={self.author_id})>"
