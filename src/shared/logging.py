"""
Logging Configuration - Shared Layer

This module provides utilities for configuring logging across the application.
Both structlog and stdlib records are rendered by the same formatter and are
tagged with the service role name before rendering.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import DEFAULT_ROLE_NAME, EnumEnvironment
from src.shared.telemetry import RoleNameTagger

def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """
    Get logging configuration from environment variables.

    This is used for initial bootstrap configuration before
    the full settings system is available.

    Returns:
        Dict containing logging configuration.
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "role_name": os.environ.get("TELEMETRY_ROLE_NAME"),
    }


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
    role_name: Optional[str] = None,
) -> None:
    """
    Configure structlog on top of Python's standard logging system.

    This function should be called at application startup, before the main
    config system is initialized, to ensure early logging capability.

    Args:
        level: Optional override for the log level.
        file_path: Optional override for log file path.
        environment: Application environment (development, production, etc.)
        role_name: Logical service name stamped on every record.
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or "INFO"
    log_file = file_path or env_config["file_path"]
    tagger = RoleNameTagger(role_name or env_config["role_name"] or DEFAULT_ROLE_NAME)

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    is_production = environment.lower() == EnumEnvironment.PRODUCTION.value

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    renderer: Processor
    if is_production:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            tagger,
        ],
    )

    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            tagger,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.info(f"Logging configured with level: {log_level}")
    if log_file:
        logging.info(f"Logging to file: {log_file}")


def update_logging_from_settings(settings: Any) -> None:
    """
    Update logging configuration using the application settings.

    This should be called after the settings system is fully initialized.

    Args:
        settings: The application settings object from Pydantic.
    """
    try:
        log_level = (
            settings.logging.level.value
            if hasattr(settings.logging.level, "value")
            else settings.logging.level
        )
        environment = (
            settings.environment.value
            if hasattr(settings.environment, "value")
            else settings.environment
        )
        telemetry = getattr(settings, "telemetry", None)

        configure_logging(
            level=log_level,
            file_path=settings.logging.file_path,
            environment=environment,
            role_name=getattr(telemetry, "role_name", None),
        )

        logging.info("Logging configuration updated from application settings")
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
