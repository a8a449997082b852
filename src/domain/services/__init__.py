"""Domain services package."""

from .secret_validator import SecretValidator

__all__ = ["SecretValidator"]
