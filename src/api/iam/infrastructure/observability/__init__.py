"""Structlog probes for the user repository."""

from iam.infrastructure.observability.repository_probe import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)

__all__ = [
    "UserRepositoryProbe",
    "DefaultUserRepositoryProbe",
]
