# -*- coding: utf-8 -*-
"""Logging configuration for structlog + Logfire."""

from __future__ import annotations

import logging
import logfire
import structlog
from typing import Any
from structlog.types import EventDict, Processor
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from polymarket_trade_monitor.config import LoggingSettings, Settings, get_settings

LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}


def _add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Attach logger name, app_name, service info and environment to every log event."""
    stdlib_logger = getattr(logger, "_logger", None)
    event_dict["logger"] = (
        getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
    )
    app_settings = get_settings().app
    event_dict["app_name"] = app_settings.app_name
    if app_settings.service_name:
        event_dict["service_name"] = app_settings.service_name
    if app_settings.service_version:
        event_dict["service_version"] = app_settings.service_version
    event_dict["environment"] = app_settings.environment
    return event_dict


def _build_handlers(cfg: LoggingSettings) -> list[logging.Handler]:
    """Console and/or rotating file handlers; messages are pre-rendered by structlog."""
    handlers: list[logging.Handler] = []
    if cfg.log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, cfg.console_level, logging.INFO))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
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
        file_handler.setLevel(getattr(logging, cfg.file_level, logging.INFO))
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)
    return handlers


def _configure_logfire(settings: Settings) -> None:
    app_settings = settings.app
    cfg = settings.logging
    logfire.configure(
        token=cfg.logfire_token,
        service_name=app_settings.service_name or app_settings.app_name,
        service_version=app_settings.service_version,
        min_level=LOG_LEVEL_TO_LOGFIRE.get(cfg.logfire_level, "info"),  # type: ignore[arg-type]
        environment=app_settings.environment,
    )


def _build_processors(cfg: LoggingSettings) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_context,
    ]

    if cfg.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    # File output is always JSON; console follows json_format unless a file is also written.
    if cfg.log_to_console or cfg.log_to_file:
        use_json = cfg.log_to_file or cfg.json_format
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer()
        )
        processors.append(renderer)  # type: ignore[arg-type]
    return processors


def configure_logging(settings: Settings | None = None) -> None:
    """Configure stdlib handlers, optional Logfire and the structlog processor chain."""
    settings = settings or get_settings()
    cfg = settings.logging

    handlers = _build_handlers(cfg)
    if handlers:
        logging.basicConfig(level=min(h.level for h in handlers), handlers=handlers)

    if cfg.logfire_enabled:
        _configure_logfire(settings)

    structlog.configure(
        processors=_build_processors(cfg),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
