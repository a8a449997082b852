"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate calls to the domain ports
and turn their outcomes into domain results.
"""

from .configuration_use_cases import PreloadConfigurationSecretsUseCase
from .health_use_cases import (
    ProbeConfigurationHealthUseCase,
    ProbeSecretHealthUseCase,
)

__all__ = [
    "PreloadConfigurationSecretsUseCase",
    "ProbeConfigurationHealthUseCase",
    "ProbeSecretHealthUseCase",
]
