"""Carts health endpoints probing the secret store directly."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from src.application.dtos.health_dto import HealthProbeDTO
from src.application.use_cases.health_use_cases import ProbeSecretHealthUseCase
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/v1/CartHealth", tags=["Health"])


@router.get(
    "/KeyVaultHealth",
    response_class=PlainTextResponse,
    responses={
        status.HTTP_206_PARTIAL_CONTENT: {"description": "Key Vault responds slowly"},
        status.HTTP_502_BAD_GATEWAY: {"description": "Key Vault unavailable"},
    },
)
@inject
async def key_vault_health(
    probe_secret_health_use_case: ProbeSecretHealthUseCase = Depends(
        Provide["probe_secret_health_use_case"]
    ),
) -> PlainTextResponse:
    """Fetch the connection string secret from Key Vault and time the call."""
    result = await probe_secret_health_use_case.execute()
    dto = HealthProbeDTO.from_domain(result)
    logger.debug(
        "keyvault.health.reported",
        state=dto.state.value,
        status_code=dto.status_code,
    )
    return PlainTextResponse(dto.message, status_code=dto.status_code)
