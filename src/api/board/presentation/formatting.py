"""Display helpers shared by board and reply responses."""

from __future__ import annotations

from datetime import datetime

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M"


def format_display_time(value: datetime) -> str:
    """Render a timestamp the way listings show it, e.g. ``2026-10-19 09:12``."""
    return value.strftime(DISPLAY_TIME_FORMAT)
