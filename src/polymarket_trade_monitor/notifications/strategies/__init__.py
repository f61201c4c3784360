"""Notification strategies."""

from polymarket_trade_monitor.notifications.strategies.base import BaseNotificationStrategy
from polymarket_trade_monitor.notifications.strategies.console import ConsoleNotifier
from polymarket_trade_monitor.notifications.strategies.telegram import TelegramNotifier

__all__ = [
    "BaseNotificationStrategy",
    "ConsoleNotifier",
    "TelegramNotifier",
]
