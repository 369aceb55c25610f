"""Async engine factories for the bulletin database.

Two engines share one Postgres database: the write engine serves service
transactions that take row locks, the read engine serves board listings and
detail pages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

if TYPE_CHECKING:
    from infrastructure.settings import DatabaseSettings

__all__ = [
    "build_async_url",
    "create_read_engine",
    "create_write_engine",
]


def _engine(settings: DatabaseSettings, **options) -> AsyncEngine:
    return create_async_engine(
        build_async_url(settings),
        pool_size=settings.pool_max_connections,
        max_overflow=0,
        pool_pre_ping=True,
        echo=False,
        **options,
    )


def create_write_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Engine for register, edit and delete transactions.

    Board and reply mutations lock the rows they check with
    ``FOR UPDATE``/``FOR SHARE``, so READ COMMITTED (the server default)
    is enough.
    """
    return _engine(settings)


def create_read_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Engine for lock-free reads, on its own pool.

    A burst of board listings cannot then exhaust the connections that
    mutations need.
    """
    return _engine(settings, isolation_level="READ COMMITTED")


def build_async_url(settings: DatabaseSettings) -> str:
    """Render a ``postgresql+asyncpg`` URL with credentials percent-encoded."""
    url = URL.create(
        drivername="postgresql+asyncpg",
        username=settings.username,
        password=settings.password.get_secret_value(),
        host=settings.host,
        port=settings.port,
        database=settings.database,
    )
    return url.render_as_string(hide_password=False)
