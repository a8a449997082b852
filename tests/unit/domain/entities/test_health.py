from __future__ import annotations

import dataclasses

import pytest

from src.domain.entities.health import (
    Degraded,
    HealthIssue,
    HealthState,
    Healthy,
    Unreachable,
)


def test_variants_expose_state() -> None:
    assert Healthy(latency_ms=12.0).state is HealthState.HEALTHY
    assert Degraded(latency_ms=150.0).state is HealthState.DEGRADED
    assert (
        Unreachable(cause=HealthIssue.INVALID_CONTENT).state
        is HealthState.UNREACHABLE
    )


def test_degraded_is_always_a_slow_response() -> None:
    assert Degraded(latency_ms=101.0).issue is HealthIssue.SLOW_RESPONSE


def test_unreachable_issue_is_its_cause() -> None:
    result = Unreachable(
        cause=HealthIssue.DEPENDENCY_REQUEST_FAILURE, error="forbidden"
    )
    assert result.issue is HealthIssue.DEPENDENCY_REQUEST_FAILURE
    assert result.latency_ms is None
    assert result.error == "forbidden"


def test_results_are_immutable() -> None:
    result = Healthy(latency_ms=5.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.latency_ms = 10.0  # type: ignore[misc]
