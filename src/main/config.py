"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.consts import (
    DEFAULT_HEALTH_SECRET_NAME,
    DEFAULT_ROLE_NAME,
    DEFAULT_SECRET_MARKER,
)
from src.shared.env import load_secret_file_variables  # noqa: F401


class ApiSettings(BaseSettings):
    """HTTP API configuration settings."""

    title: str = Field(default="Carts API", description="API title")
    description: str = Field(
        default="Carts service health endpoints", description="API description"
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="API_", case_sensitive=False, extra="ignore"
    )


class KeyVaultSettings(BaseSettings):
    """Azure Key Vault connection settings."""

    vault_url: str = Field(
        default="", description="Vault URL, e.g. https://myvault.vault.azure.net"
    )
    tenant_id: str = Field(default="", description="Azure AD tenant ID")
    client_id: str = Field(default="", description="Service principal client ID")
    client_secret: str = Field(
        default="", description="Service principal client secret"
    )
    authority_host: str = Field(
        default="https://login.microsoftonline.com",
        description="Azure AD authority host",
    )
    api_version: str = Field(default="7.4", description="Key Vault REST api-version")
    timeout: float = Field(default=5.0, description="Request timeout in seconds")
    preload_secrets: List[str] = Field(
        default_factory=lambda: [DEFAULT_HEALTH_SECRET_NAME],
        description="Secrets copied into configuration at startup",
    )

    model_config = SettingsConfigDict(
        env_prefix="KEYVAULT_", case_sensitive=False, extra="ignore"
    )


class HealthSettings(BaseSettings):
    """Health probe settings."""

    secret_name: str = Field(
        default=DEFAULT_HEALTH_SECRET_NAME,
        description="Secret probed in the vault and looked up in configuration",
    )
    marker: str = Field(
        default=DEFAULT_SECRET_MARKER,
        description="Substring a valid secret value must contain",
    )
    slow_threshold_ms: float = Field(
        default=100.0, description="Latency above which the vault is degraded"
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", case_sensitive=False, extra="ignore"
    )


class TelemetrySettings(BaseSettings):
    """Telemetry settings."""

    role_name: str = Field(
        default=DEFAULT_ROLE_NAME,
        description="Logical role name stamped on every telemetry record",
    )

    model_config = SettingsConfigDict(
        env_prefix="TELEMETRY_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    api: ApiSettings = Field(default_factory=ApiSettings)
    keyvault: KeyVaultSettings = Field(default_factory=KeyVaultSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
