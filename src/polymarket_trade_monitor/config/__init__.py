"""Configuration subpackage."""

from polymarket_trade_monitor.config.config import (
    ApiSettings,
    AppSettings,
    ConsoleNotificationSettings,
    DatabaseSettings,
    LoggingSettings,
    MonitorSettings,
    Settings,
    TelegramNotificationSettings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "ConsoleNotificationSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "MonitorSettings",
    "Settings",
    "TelegramNotificationSettings",
    "get_settings",
]
