from __future__ import annotations

import logging
from dataclasses import dataclass, field

import structlog

from src.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)
from src.shared.telemetry import RoleNameTagger


def _configured_role_name() -> str:
    taggers = [
        processor
        for processor in structlog.get_config()["processors"]
        if isinstance(processor, RoleNameTagger)
    ]
    assert len(taggers) == 1
    return taggers[0].role_name


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "carts.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("structured log test")


def test_configure_logging_installs_role_name_tagger(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("TELEMETRY_ROLE_NAME", raising=False)
    log_file = tmp_path / "carts.log"

    configure_logging(level="INFO", file_path=str(log_file), role_name="carts-test")
    logging.getLogger("stdlib").info("plain stdlib record")

    assert _configured_role_name() == "carts-test"
    assert "cloud_role_name" in log_file.read_text(encoding="utf-8")


def test_configure_logging_reads_role_name_from_env(monkeypatch) -> None:
    monkeypatch.setenv("TELEMETRY_ROLE_NAME", "carts-from-env")
    configure_logging()
    assert _configured_role_name() == "carts-from-env"


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    file_path: str | None = None


@dataclass
class _TelemetrySettings:
    role_name: str = "carts-settings"


@dataclass
class _Settings:
    logging: _LoggingSettings
    telemetry: _TelemetrySettings = field(default_factory=_TelemetrySettings)
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR
    assert _configured_role_name() == "carts-settings"


def test_stdlib_records_are_rendered_with_role_name(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("TELEMETRY_ROLE_NAME", raising=False)
    log_file = tmp_path / "carts.log"

    configure_logging(
        level="INFO",
        file_path=str(log_file),
        environment="production",
        role_name="carts-test",
    )
    logging.getLogger("uvicorn.error").info("stdlib hello")

    lines = [
        line
        for line in log_file.read_text(encoding="utf-8").splitlines()
        if "stdlib hello" in line
    ]
    assert len(lines) == 1
    assert '"cloud_role_name": "carts-test"' in lines[0]
    assert '"logger": "uvicorn.error"' in lines[0]
