# -*- coding: utf-8 -*-
"""Logging configuration for structlog + Logfire.

stdlib handlers (console, timed rotating file) carry structlog output; Logfire is
optional. Credentials from settings are redacted from every event before rendering.
"""

from __future__ import annotations

import logging
import logfire
import structlog
from typing import Any
from structlog.types import EventDict, Processor
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from cmc_listings_notifier.config import LoggingSettings, Settings, get_settings

REDACTED = "***"

# Map standard logging levels to Logfire levels
LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}

# Loggers that are chatty at INFO (per-request lines)
QUIET_LOGGERS = ("azure",)


def _service_context_processor(settings: Settings) -> Processor:
    """Build a processor that attaches logger name and app identity to every event."""
    app_settings = settings.app

    def _add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        stdlib_logger = getattr(logger, "_logger", None)
        event_dict["logger"] = (
            getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
        )
        event_dict["app_name"] = app_settings.app_name
        if app_settings.service_name:
            event_dict["service_name"] = app_settings.service_name
        event_dict["environment"] = app_settings.environment
        return event_dict

    return _add_service_context


def _configured_secrets(settings: Settings) -> list[str]:
    candidates = (
        settings.cmc.api_key,
        settings.twilio.auth_token,
        settings.smtp.password,
        settings.storage.connection_string,
    )
    return [s for s in candidates if s]


def redact_secrets_processor(settings: Settings) -> Processor:
    """Build a processor that replaces configured credentials in string values with ***.

    Error messages from HTTP and storage clients may echo request URLs, bodies or
    connection strings.
    """
    secrets = _configured_secrets(settings)

    def _redact(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        if not secrets:
            return event_dict
        for key, value in event_dict.items():
            if isinstance(value, str):
                for secret in secrets:
                    if secret in value:
                        value = value.replace(secret, REDACTED)
                event_dict[key] = value
        return event_dict

    return _redact


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _build_handlers(cfg: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if cfg.log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(cfg.console_level))
        handlers.append(console_handler)
    if cfg.log_to_file:
        log_file_path = Path(cfg.log_file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_file_path,
            when=cfg.log_file_when,
            interval=cfg.log_file_interval,
            backupCount=cfg.log_file_backup_count,
            encoding="utf-8",
            utc=cfg.log_file_utc,
        )
        file_handler.setLevel(_level(cfg.file_level))
        handlers.append(file_handler)
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handlers


def _renderer(cfg: LoggingSettings) -> Processor:
    # A log file is always JSON so it can be shipped; the console follows json_format.
    if cfg.log_to_file or cfg.json_format:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure stdlib handlers, optional Logfire and the structlog pipeline."""
    settings = settings or get_settings()
    cfg = settings.logging

    handlers = _build_handlers(cfg)
    if handlers:
        logging.basicConfig(
            level=min(h.level for h in handlers), handlers=handlers, force=True
        )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if cfg.logfire_enabled:
        logfire.configure(
            token=cfg.logfire_token,
            service_name=settings.app.service_name or settings.app.app_name,
            service_version=settings.app.service_version,
            min_level=LOG_LEVEL_TO_LOGFIRE.get(cfg.logfire_level, "info"),  # type: ignore[arg-type]
            environment=settings.app.environment,
        )

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_context_processor(settings),
        redact_secrets_processor(settings),
    ]
    if cfg.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]
    processors.append(_renderer(cfg))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
