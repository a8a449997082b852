"""
Application Layer Package

This package contains the application-specific rules and use cases.
It drives the domain ports and shapes their outcomes for the
presentation layer.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
