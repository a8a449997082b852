"""DTOs describing how a health probe outcome is reported to callers."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import (
    Degraded,
    HealthCheckResult,
    HealthIssue,
    HealthState,
    Healthy,
)

DEGRADED_MESSAGE = "Service degraded: KeyVault response slow."

_FAILURE_MESSAGES: Dict[HealthIssue, str] = {
    HealthIssue.INVALID_CONTENT: "Unable to retrieve valid KeyVault secret.",
    HealthIssue.DEPENDENCY_REQUEST_FAILURE: (
        "Unable to retrieve KeyVault secret due to a request failure."
    ),
    HealthIssue.UNEXPECTED_FAILURE: "An unexpected error occurred.",
}


class HealthProbeDTO(BaseModel):
    """Transport-ready view of a probe result."""

    state: HealthState = Field(description="Outcome of the probe")
    status_code: int = Field(description="HTTP status reported to the caller")
    message: str = Field(description="Human readable status note")
    issue: Optional[HealthIssue] = Field(
        default=None, description="Reason the probe was not healthy"
    )
    latency_ms: Optional[float] = Field(
        default=None, description="Time spent waiting on the dependency"
    )

    @property
    def is_healthy(self) -> bool:
        return self.state is HealthState.HEALTHY

    @classmethod
    def from_domain(cls, result: HealthCheckResult) -> "HealthProbeDTO":
        if isinstance(result, Healthy):
            if result.latency_ms is None:
                message = "All good here - KeyVault accessible :)"
            else:
                message = (
                    "All good here - KeyVault accessible :) - "
                    f"responds in {int(result.latency_ms)} ms."
                )
            return cls(
                state=result.state,
                status_code=200,
                message=message,
                latency_ms=result.latency_ms,
            )

        if isinstance(result, Degraded):
            return cls(
                state=result.state,
                status_code=206,
                message=DEGRADED_MESSAGE,
                issue=result.issue,
                latency_ms=result.latency_ms,
            )

        return cls(
            state=result.state,
            status_code=502,
            message=_FAILURE_MESSAGES[result.cause],
            issue=result.cause,
            latency_ms=result.latency_ms,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "state": "healthy",
                "status_code": 200,
                "message": "All good here - KeyVault accessible :) - responds in 40 ms.",
                "issue": None,
                "latency_ms": 40.2,
            }
        }
    }
