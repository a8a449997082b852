"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.configuration_use_cases import (
    PreloadConfigurationSecretsUseCase,
)
from src.application.use_cases.health_use_cases import (
    ProbeConfigurationHealthUseCase,
    ProbeSecretHealthUseCase,
)
from src.domain.services.secret_validator import SecretValidator
from src.infrastructure.configuration import LayeredConfigurationProvider
from src.infrastructure.gateways.key_vault_gateway import KeyVaultSecretGateway
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    secret_store = providers.Singleton(
        KeyVaultSecretGateway,
        vault_url=config.keyvault.vault_url,
        tenant_id=config.keyvault.tenant_id,
        client_id=config.keyvault.client_id,
        client_secret=config.keyvault.client_secret,
        authority_host=config.keyvault.authority_host,
        api_version=config.keyvault.api_version,
        timeout=config.keyvault.timeout,
    )

    configuration_provider = providers.Singleton(LayeredConfigurationProvider)

    # Domain services
    secret_validator = providers.Singleton(
        SecretValidator,
        marker=config.health.marker,
    )

    # Application (use cases)
    probe_secret_health_use_case = providers.Factory(
        ProbeSecretHealthUseCase,
        secret_store=secret_store,
        validator=secret_validator,
        secret_name=config.health.secret_name,
        slow_threshold_ms=config.health.slow_threshold_ms,
    )

    probe_configuration_health_use_case = providers.Factory(
        ProbeConfigurationHealthUseCase,
        configuration=configuration_provider,
        validator=secret_validator,
        key=config.health.secret_name,
    )

    preload_configuration_secrets_use_case = providers.Factory(
        PreloadConfigurationSecretsUseCase,
        secret_store=secret_store,
        configuration=configuration_provider,
        secret_names=config.keyvault.preload_secrets,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    On startup, secrets listed in ``KEYVAULT_PRELOAD_SECRETS`` are copied
    from the vault into the configuration provider, the same way a vault
    backed configuration source would be read once when the host starts.
    """
    container = get_container()

    if container.config.keyvault.vault_url():
        preload = container.preload_configuration_secrets_use_case()
        await preload.execute()
    else:
        logger.info("container.configuration.preload_skipped", reason="no vault url")

    logger.info("container.resources.initialized")
    try:
        yield container
    finally:
        logger.info("container.resources.shutdown")
