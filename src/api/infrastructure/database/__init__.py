"""Database infrastructure - shared engine, session and model primitives."""

from infrastructure.database.models import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
]
