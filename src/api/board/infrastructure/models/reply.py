"""SQLAlchemy ORM model for the replies table."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ReplyModel(Base, TimestampMixin):
    """ORM model for replies table.

    ``board_id`` cascades on delete as a backstop; the application deletes
    replies explicitly in the same transaction as their board.
    """

    __tablename__ = "replies"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    board_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    comment: Mapped[str] = mapped_column(String(500), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ReplyModel(id={self.id}, board_id={self.board_id})>"
