"""
Domain Layer Package

This package contains the core rules of the application: health outcomes,
secrets, errors and the ports through which external systems are reached.
It has no dependencies on frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]
