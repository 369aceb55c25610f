"""Per-request database sessions for FastAPI routes.

The write and read engines are built lazily on first use and live for the
process. Each request gets a fresh ``AsyncSession``; services open the
transaction themselves with ``session.begin()``.
"""

from __future__ import annotations

import threading
from typing import AsyncGenerator, Callable

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_read_engine, create_write_engine
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import DatabaseSettings, get_database_settings

_probe = DefaultConnectionProbe()
_lock = threading.Lock()


class _LazyPool:
    """One engine and its sessionmaker, created on first request."""

    def __init__(self, factory: Callable[[DatabaseSettings], AsyncEngine]):
        self._factory = factory
        self.engine: AsyncEngine | None = None
        self.sessionmaker: async_sessionmaker[AsyncSession] | None = None

    def open(self) -> async_sessionmaker[AsyncSession]:
        if self.sessionmaker is None:
            with _lock:
                if self.sessionmaker is None:
                    settings = get_database_settings()
                    self.engine = self._factory(settings)
                    self.sessionmaker = async_sessionmaker(
                        self.engine, expire_on_commit=False, class_=AsyncSession
                    )
                    _probe.pool_initialized(
                        min_conn=settings.pool_min_connections,
                        max_conn=settings.pool_max_connections,
                    )
        return self.sessionmaker

    async def close(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        _probe.pool_closed()
        self.engine = None
        self.sessionmaker = None


_write = _LazyPool(create_write_engine)
_read = _LazyPool(create_read_engine)


def get_write_engine() -> AsyncEngine:
    """Return the process-wide engine used for mutations."""
    _write.open()
    return _write.engine


def get_read_engine() -> AsyncEngine:
    """Return the process-wide engine used for lock-free reads."""
    _read.open()
    return _read.engine


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: a session for service transactions.

    Nothing is committed here. A service that leaves its ``session.begin()``
    block with an exception, including request cancellation, rolls back.
    """
    async with _write.open()() as session:
        yield session


async def get_read_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: a session for listings, detail pages and /users/me.

    Read-only by convention; the database does not enforce it.
    """
    async with _read.open()() as session:
        yield session


async def close_database_connections() -> None:
    """Dispose both engines on shutdown so the next use rebuilds them."""
    await _write.close()
    await _read.close()
