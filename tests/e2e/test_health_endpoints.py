from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.application.use_cases.health_use_cases import ProbeSecretHealthUseCase
from src.domain.entities.errors import SecretRequestError
from src.domain.services.secret_validator import SecretValidator
from src.main.app import create_app
from src.main.container import get_container
from tests.conftest import VALID_CONNECTION_STRING, FakeSecretStore, clock_for


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.delenv("KEYVAULT_VAULT_URL", raising=False)
    monkeypatch.delenv("APPINSIGHTSCONNECTIONSTRING", raising=False)
    monkeypatch.delenv("appInsightsConnectionString", raising=False)
    return create_app()


def _override_secret_probe(store: FakeSecretStore, elapsed_ms: float) -> None:
    get_container().probe_secret_health_use_case.override(
        providers.Factory(
            ProbeSecretHealthUseCase,
            secret_store=store,
            validator=SecretValidator(),
            secret_name="appInsightsConnectionString",
            clock=providers.Factory(clock_for, elapsed_ms),
        )
    )


def test_cart_health_ok(app):
    store = FakeSecretStore({"appInsightsConnectionString": VALID_CONNECTION_STRING})
    _override_secret_probe(store, 40)

    with TestClient(app) as client:
        response = client.get("/v1/CartHealth/KeyVaultHealth")

    assert response.status_code == 200
    assert "40 ms" in response.text


def test_cart_health_degraded(app):
    store = FakeSecretStore({"appInsightsConnectionString": VALID_CONNECTION_STRING})
    _override_secret_probe(store, 150)

    with TestClient(app) as client:
        response = client.get("/v1/CartHealth/KeyVaultHealth")

    assert response.status_code == 206
    assert response.text == "Service degraded: KeyVault response slow."


def test_cart_health_invalid_secret(app):
    store = FakeSecretStore({"appInsightsConnectionString": "garbage"})
    _override_secret_probe(store, 10)

    with TestClient(app) as client:
        response = client.get("/v1/CartHealth/KeyVaultHealth")

    assert response.status_code == 502


def test_cart_health_request_failure(app):
    store = FakeSecretStore(error=SecretRequestError("forbidden", status_code=403))
    _override_secret_probe(store, 10)

    with TestClient(app) as client:
        response = client.get("/v1/CartHealth/KeyVaultHealth")

    assert response.status_code == 502
    assert (
        response.text == "Unable to retrieve KeyVault secret due to a request failure."
    )


def test_configuration_health_after_preload(app):
    container = get_container()
    container.config.keyvault.vault_url.override("https://carts.vault.azure.net")
    store = FakeSecretStore({"appInsightsConnectionString": VALID_CONNECTION_STRING})
    container.secret_store.override(providers.Object(store))

    with TestClient(app) as client:
        response = client.get("/Health/KeyVaultHealth")

    assert response.status_code == 200
    assert response.json() is True


def test_configuration_health_without_cached_secret(app):
    with TestClient(app) as client:
        response = client.get("/Health/KeyVaultHealth")

    assert response.status_code == 502
    assert response.text == "Unable to retrieve valid KeyVault secret."
