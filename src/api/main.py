"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.middleware.sessions import SessionMiddleware

from board.presentation import router as board_router
from iam.presentation import router as iam_router
from infrastructure.database.dependencies import (
    close_database_connections,
    get_read_session,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultConnectionProbe, DefaultStartupProbe
from infrastructure.settings import get_settings
from infrastructure.version import __version__

settings = get_settings()
configure_logging(debug=settings.debug)

_startup_probe = DefaultStartupProbe()
_connection_probe = DefaultConnectionProbe()


@asynccontextmanager
async def bulletin_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Startup warnings about insecure configuration
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    if settings.session.uses_default_secret:
        _startup_probe.default_session_secret_in_use()
    _startup_probe.application_started(app_name=settings.app_name, version=__version__)

    yield

    await close_database_connections()
    _startup_probe.application_stopped(app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Boards and replies with author-only editing",
    version=__version__,
    lifespan=bulletin_lifespan,
)

# Signed cookie holding the session identity
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session.secret_key.get_secret_value(),
    session_cookie=settings.session.cookie_name,
    max_age=settings.session.max_age_seconds,
    same_site=settings.session.same_site,
    https_only=settings.session.https_only,
)

app.include_router(iam_router)
app.include_router(board_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
async def health_db(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> dict:
    """Check database connection health."""
    try:
        await session.execute(text("SELECT 1"))
        return {"status": "ok", "connected": True}
    except Exception as e:
        _connection_probe.health_check_failed(e)
        return {
            "status": "error",
            "connected": False,
            "error": str(e),
        }
