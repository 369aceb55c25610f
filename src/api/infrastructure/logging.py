"""Structlog setup for the bulletin API.

Every probe logs through structlog; this module decides how those events
are rendered and which levels reach the output.
"""

import logging
import os
import sys

import structlog

_TRUTHY = ("1", "true", "yes")


def _wants_color() -> bool:
    # Docker and CI attach no TTY; FORCE_COLOR opts back in
    forced = os.environ.get("FORCE_COLOR", "").lower() in _TRUTHY
    return forced or sys.stdout.isatty()


def configure_logging(debug: bool = False) -> None:
    """Install the process-wide structlog configuration.

    Events render as colored console lines for a developer terminal and as
    JSON lines everywhere else. Lookup and not-found events are debug level
    and are filtered out unless ``debug`` is set.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if _wants_color():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
