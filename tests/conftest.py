from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

import pytest

from src.domain.entities.errors import SecretRequestError
from src.domain.entities.secret import Secret

VALID_CONNECTION_STRING = (
    "InstrumentationKey=00000000-0000-0000-0000-000000000000;"
    "IngestionEndpoint=https://westeurope-5.in.applicationinsights.azure.com/;"
    "LiveEndpoint=https://westeurope.livediagnostics.monitor.azure.com/"
)


class FakeClock:
    """Clock returning preset readings, in seconds."""

    def __init__(self, readings: Iterable[float]) -> None:
        self._readings: Iterator[float] = iter(readings)
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return next(self._readings)


def clock_for(elapsed_ms: float) -> FakeClock:
    return FakeClock([0.0, elapsed_ms / 1000])


class FakeSecretStore:
    def __init__(
        self,
        secrets: Optional[Dict[str, Optional[str]]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.secrets = dict(secrets or {})
        self.error = error
        self.requested: List[str] = []

    async def get_secret(self, name: str, version: Optional[str] = None) -> Secret:
        self.requested.append(name)
        if self.error is not None:
            raise self.error
        if name not in self.secrets:
            raise SecretRequestError(
                f"Key Vault HTTP error 404: secret {name} not found", status_code=404
            )
        return Secret(name=name, value=self.secrets[name])


class FakeConfiguration:
    def __init__(
        self,
        values: Optional[Dict[str, str]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.values = dict(values or {})
        self.error = error

    def get(self, key: str) -> Optional[str]:
        if self.error is not None:
            raise self.error
        return self.values.get(key)

    def load(self, values: Dict[str, str]) -> None:
        self.values.update(values)


@pytest.fixture()
def valid_connection_string() -> str:
    return VALID_CONNECTION_STRING


@pytest.fixture()
def fake_secret_store() -> FakeSecretStore:
    return FakeSecretStore({"appInsightsConnectionString": VALID_CONNECTION_STRING})
