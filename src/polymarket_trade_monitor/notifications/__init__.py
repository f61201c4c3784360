"""Notification subsystem."""

from polymarket_trade_monitor.notifications.notification_manager import NotificationService
from polymarket_trade_monitor.notifications.strategies import (
    BaseNotificationStrategy,
    ConsoleNotifier,
    TelegramNotifier,
)
from polymarket_trade_monitor.notifications.stylers.notification_styler import (
    TradeNotificationStyler,
)
from polymarket_trade_monitor.notifications.types import (
    NotificationMessage,
    NotificationStyler,
)

__all__ = [
    "BaseNotificationStrategy",
    "ConsoleNotifier",
    "TelegramNotifier",
    "NotificationMessage",
    "NotificationService",
    "NotificationStyler",
    "TradeNotificationStyler",
]
