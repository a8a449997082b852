"""
Domain Entities Package

This package contains the core domain entities and value objects.
"""

from .errors import DomainError, SecretRequestError
from .health import (
    Degraded,
    HealthCheckResult,
    HealthIssue,
    HealthState,
    Healthy,
    Unreachable,
)
from .secret import Secret

__all__ = [
    "Degraded",
    "DomainError",
    "HealthCheckResult",
    "HealthIssue",
    "HealthState",
    "Healthy",
    "Secret",
    "SecretRequestError",
    "Unreachable",
]
