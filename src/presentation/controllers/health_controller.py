"""Health endpoints backed by the configuration cache."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from src.application.dtos.health_dto import HealthProbeDTO
from src.application.use_cases.health_use_cases import (
    ProbeConfigurationHealthUseCase,
)

router = APIRouter(prefix="/Health", tags=["Health"])


@router.get(
    "/KeyVaultHealth",
    response_model=bool,
    responses={
        status.HTTP_502_BAD_GATEWAY: {"description": "Cached secret invalid"},
    },
)
@inject
def key_vault_health(
    probe_configuration_health_use_case: ProbeConfigurationHealthUseCase = Depends(
        Provide["probe_configuration_health_use_case"]
    ),
) -> Response:
    """Check the Key Vault secret already resolved into configuration."""
    dto = HealthProbeDTO.from_domain(probe_configuration_health_use_case.execute())
    if dto.is_healthy:
        return JSONResponse(True)
    return PlainTextResponse(dto.message, status_code=dto.status_code)
