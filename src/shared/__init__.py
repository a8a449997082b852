"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, defaults)
- Configuring structured logging and telemetry tagging
- Resolving secrets supplied as files

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings
from .telemetry import RoleNameTagger

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "RoleNameTagger",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
