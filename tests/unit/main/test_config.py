from __future__ import annotations

from src.main.config import AppSettings, LoggingSettings, get_settings
from src.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("HEALTH_SLOW_THRESHOLD_MS", raising=False)
    monkeypatch.delenv("KEYVAULT_VAULT_URL", raising=False)

    settings = get_settings()

    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.health.secret_name == "appInsightsConnectionString"
    assert settings.health.marker == "IngestionEndpoint"
    assert settings.health.slow_threshold_ms == 100.0
    assert settings.keyvault.preload_secrets == ["appInsightsConnectionString"]


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("KEYVAULT_VAULT_URL", "https://carts.vault.azure.net")
    monkeypatch.setenv("HEALTH_SLOW_THRESHOLD_MS", "250")
    monkeypatch.setenv("TELEMETRY_ROLE_NAME", "carts-westeurope")
    monkeypatch.setenv("API_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.keyvault.vault_url == "https://carts.vault.azure.net"
    assert settings.health.slow_threshold_ms == 250.0
    assert settings.telemetry.role_name == "carts-westeurope"
    assert settings.api.title == "Testing"
    assert settings.logging.level.value == "DEBUG"


def test_logging_settings_expose_only_applied_options() -> None:
    assert set(LoggingSettings.model_fields) == {"level", "file_path"}
