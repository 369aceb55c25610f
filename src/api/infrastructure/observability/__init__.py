"""Structured-logging probes for process-level infrastructure events.

Each probe turns an infrastructure happening (pool opened, app started,
health check failed) into one named structlog event.
"""

from infrastructure.observability.probes import (
    ConnectionProbe,
    DefaultConnectionProbe,
)
from infrastructure.observability.startup_probe import (
    DefaultStartupProbe,
    StartupProbe,
)

__all__ = [
    "ConnectionProbe",
    "DefaultConnectionProbe",
    "DefaultStartupProbe",
    "StartupProbe",
]
