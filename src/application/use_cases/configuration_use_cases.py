"""Use cases that populate local configuration from the secret store."""

from typing import Dict, Sequence

from src.domain.entities.errors import SecretRequestError
from src.domain.ports.configuration import IConfigurationStore
from src.domain.ports.secret_store import ISecretStore
from src.shared import get_logger

logger = get_logger(__name__)


class PreloadConfigurationSecretsUseCase:
    """Copy selected secrets into configuration once, at startup.

    Secrets that cannot be fetched are skipped so that the service still
    starts; the configuration health endpoint then reports them as invalid.
    """

    def __init__(
        self,
        secret_store: ISecretStore,
        configuration: IConfigurationStore,
        secret_names: Sequence[str],
    ) -> None:
        self._secret_store = secret_store
        self._configuration = configuration
        self._secret_names = list(secret_names)

    async def execute(self) -> Dict[str, str]:
        loaded: Dict[str, str] = {}

        for name in self._secret_names:
            try:
                secret = await self._secret_store.get_secret(name)
            except SecretRequestError as exc:
                logger.warning(
                    "configuration.preload.request_failed",
                    secret_name=name,
                    status_code=exc.status_code,
                    error=str(exc),
                )
                continue

            if not secret.value:
                logger.warning("configuration.preload.empty_secret", secret_name=name)
                continue

            loaded[name] = secret.value

        self._configuration.load(loaded)
        logger.info(
            "configuration.preload.completed",
            loaded=sorted(loaded),
            requested=len(self._secret_names),
        )
        return loaded
