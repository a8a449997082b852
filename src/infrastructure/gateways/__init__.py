"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the ports defined in
the domain layer. These implementations handle the details of external
service communications.
"""

from .key_vault_gateway import KeyVaultSecretGateway

__all__ = ["KeyVaultSecretGateway"]
