"""Configuration providers - Infrastructure Layer."""

from .layered_configuration import LayeredConfigurationProvider

__all__ = ["LayeredConfigurationProvider"]
