"""Use cases for the Key Vault health endpoints."""

from time import perf_counter
from typing import Callable

from src.domain.entities.errors import SecretRequestError
from src.domain.entities.health import (
    Degraded,
    HealthCheckResult,
    HealthIssue,
    Healthy,
    Unreachable,
)
from src.domain.ports.configuration import IConfigurationProvider
from src.domain.ports.secret_store import ISecretStore
from src.domain.services.secret_validator import SecretValidator
from src.shared import get_logger

logger = get_logger(__name__)

DEFAULT_SLOW_THRESHOLD_MS = 100.0


class ProbeSecretHealthUseCase:
    """Fetch a well-known secret from the secret store and grade the answer.

    The probe is timed around the retrieval call. A slow answer is reported
    as degraded before its content is looked at; a fast answer is healthy
    only when the value carries the validity marker.
    """

    def __init__(
        self,
        secret_store: ISecretStore,
        validator: SecretValidator,
        secret_name: str,
        slow_threshold_ms: float = DEFAULT_SLOW_THRESHOLD_MS,
        clock: Callable[[], float] = perf_counter,
    ) -> None:
        self._secret_store = secret_store
        self._validator = validator
        self._secret_name = secret_name
        self._slow_threshold_ms = slow_threshold_ms
        self._clock = clock

    async def execute(self) -> HealthCheckResult:
        start = self._clock()

        try:
            secret = await self._secret_store.get_secret(self._secret_name)
            elapsed_ms = self._elapsed_ms(start)

            # Compared in whole milliseconds, the unit reported to callers.
            if int(elapsed_ms) > self._slow_threshold_ms:
                logger.warning(
                    "keyvault.health.slow",
                    secret_name=self._secret_name,
                    elapsed_ms=int(elapsed_ms),
                    threshold_ms=self._slow_threshold_ms,
                )
                return Degraded(latency_ms=elapsed_ms)

            if self._validator.is_valid(secret.value):
                logger.debug(
                    "keyvault.health.ok",
                    secret_name=self._secret_name,
                    elapsed_ms=int(elapsed_ms),
                )
                return Healthy(latency_ms=elapsed_ms)

            logger.warning(
                "keyvault.health.invalid_secret",
                secret_name=self._secret_name,
                marker=self._validator.marker,
            )
            return Unreachable(
                cause=HealthIssue.INVALID_CONTENT, latency_ms=elapsed_ms
            )

        except SecretRequestError as exc:
            elapsed_ms = self._elapsed_ms(start)
            logger.error(
                "keyvault.health.request_failed",
                secret_name=self._secret_name,
                status_code=exc.status_code,
                error=str(exc),
                exc_info=exc,
            )
            return Unreachable(
                cause=HealthIssue.DEPENDENCY_REQUEST_FAILURE,
                latency_ms=elapsed_ms,
                error=str(exc),
            )

        except Exception as exc:
            elapsed_ms = self._elapsed_ms(start)
            logger.error(
                "keyvault.health.unexpected_error",
                secret_name=self._secret_name,
                error=str(exc),
                exc_info=exc,
            )
            return Unreachable(
                cause=HealthIssue.UNEXPECTED_FAILURE,
                latency_ms=elapsed_ms,
                error=str(exc),
            )

    def _elapsed_ms(self, start: float) -> float:
        return (self._clock() - start) * 1000


class ProbeConfigurationHealthUseCase:
    """Validate the cached copy of the secret held in local configuration."""

    def __init__(
        self,
        configuration: IConfigurationProvider,
        validator: SecretValidator,
        key: str,
    ) -> None:
        self._configuration = configuration
        self._validator = validator
        self._key = key

    def execute(self) -> HealthCheckResult:
        try:
            value = self._configuration.get(self._key)

            if self._validator.is_valid(value):
                return Healthy()

            logger.warning(
                "configuration.health.invalid_secret",
                key=self._key,
                marker=self._validator.marker,
                present=value is not None,
            )
            return Unreachable(cause=HealthIssue.INVALID_CONTENT)

        except SecretRequestError as exc:
            logger.error(
                "configuration.health.request_failed",
                key=self._key,
                error=str(exc),
                exc_info=exc,
            )
            return Unreachable(
                cause=HealthIssue.DEPENDENCY_REQUEST_FAILURE, error=str(exc)
            )

        except Exception as exc:
            logger.error(
                "configuration.health.unexpected_error",
                key=self._key,
                error=str(exc),
                exc_info=exc,
            )
            return Unreachable(cause=HealthIssue.UNEXPECTED_FAILURE, error=str(exc))
