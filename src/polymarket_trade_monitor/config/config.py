# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. MONITOR__USER_ADDRESS, DATABASE__URL.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "polymarket-trade-monitor"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/trade_monitor.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ApiSettings(BaseSettings):
    """Configuration for the Polymarket Data API (HTTP)."""

    model_config = SettingsConfigDict(extra="ignore")

    data_api_host: str = Field(
        default="https://data-api.polymarket.com",
        description="Polymarket Data API base URL.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds.",
    )
    max_retries: int = Field(
        default=6,
        ge=1,
        le=20,
        description="Maximum number of retries for failed requests.",
    )
    activity_limit: int = Field(
        default=100,
        ge=1,
        le=500,
        description="Number of activity items requested per poll (GET /activity limit).",
    )


class MonitorSettings(BaseSettings):
    """Configuration for the trade monitor loop (env MONITOR__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    user_address: str = Field(
        default="",
        description="Tracked account (proxy wallet, 0x...). Required. Env: MONITOR__USER_ADDRESS.",
    )
    too_old_hours: float = Field(
        default=24.0,
        ge=0.0,
        description="Trades older than this many hours are never recorded as new.",
    )
    fetch_interval_seconds: float = Field(
        default=1.0,
        gt=0.0,
        le=3600.0,
        description="Delay between two poll cycles, in seconds.",
    )


class DatabaseSettings(BaseSettings):
    """Durable trade store (SQLAlchemy async URL, env DATABASE__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    url: str = Field(
        default="sqlite+aiosqlite:///trade_monitor.db",
        description="SQLAlchemy async database URL.",
    )
    echo: bool = False
    pool_size: int = Field(default=5, ge=1, le=100)
    max_overflow: int = Field(default=10, ge=0, le=100)


class TelegramNotificationSettings(BaseSettings):
    """Telegram notifications (from env TELEGRAM__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = False
    api_key: Optional[str] = Field(default=None, description="Telegram bot API key.")
    chat_id: Optional[str] = Field(default=None, description="Telegram chat ID.")
    messages_per_minute: int = Field(default=30, ge=1, le=120)
    max_retries: int = Field(default=5, ge=0, le=20)
    backoff_base_seconds: float = Field(default=1.0, ge=0.1, le=60.0)
    connect_timeout: float = Field(default=10.0, ge=0.1, le=60.0)
    read_timeout: float = Field(default=20.0, ge=0.1, le=120.0)


class ConsoleNotificationSettings(BaseSettings):
    """Console notification settings."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = True


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, MONITOR__TOO_OLD_HOURS.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    monitor: MonitorSettings = Field(default_factory=MonitorSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    telegram: TelegramNotificationSettings = Field(default_factory=TelegramNotificationSettings)
    console: ConsoleNotificationSettings = Field(default_factory=ConsoleNotificationSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides are passed as dicts, e.g.
        from_env(monitor={"user_address": "0x...", "too_old_hours": 1}).

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from polymarket_trade_monitor.config import get_settings

        settings = get_settings()
        interval = settings.monitor.fetch_interval_seconds
    """
    return Settings()
