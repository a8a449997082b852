"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the secret store
and the process configuration.
"""

from src.infrastructure import configuration, gateways

__all__ = ["configuration", "gateways"]
