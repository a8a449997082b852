"""
Health domain entities.

A probe outcome is one of three variants: ``Healthy``, ``Degraded`` or
``Unreachable``. Callers branch on the variant (or its ``state``) and the
presentation layer turns it into a transport status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class HealthState(str, Enum):
    """High-level availability of the probed dependency."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNREACHABLE = "unreachable"


class HealthIssue(str, Enum):
    """Reason a probe did not come back healthy."""

    SLOW_RESPONSE = "slow_response"
    INVALID_CONTENT = "invalid_content"
    DEPENDENCY_REQUEST_FAILURE = "dependency_request_failure"
    UNEXPECTED_FAILURE = "unexpected_failure"


@dataclass(frozen=True, slots=True)
class Healthy:
    """The dependency answered in time with valid content."""

    latency_ms: Optional[float] = None

    state: ClassVar[HealthState] = HealthState.HEALTHY
    issue: ClassVar[Optional[HealthIssue]] = None


@dataclass(frozen=True, slots=True)
class Degraded:
    """The dependency answered, but slower than the accepted threshold."""

    latency_ms: float

    state: ClassVar[HealthState] = HealthState.DEGRADED
    issue: ClassVar[Optional[HealthIssue]] = HealthIssue.SLOW_RESPONSE


@dataclass(frozen=True, slots=True)
class Unreachable:
    """The dependency failed or returned something unusable."""

    cause: HealthIssue
    latency_ms: Optional[float] = None
    error: Optional[str] = None

    state: ClassVar[HealthState] = HealthState.UNREACHABLE

    @property
    def issue(self) -> HealthIssue:
        return self.cause


HealthCheckResult = Union[Healthy, Degraded, Unreachable]
