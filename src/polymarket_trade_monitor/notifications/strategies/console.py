# -*- coding: utf-8 -*-
"""Console notifier (print-based)."""

from __future__ import annotations

from polymarket_trade_monitor.notifications.strategies.base import BaseNotificationStrategy
from polymarket_trade_monitor.notifications.types import NotificationMessage


class ConsoleNotifier(BaseNotificationStrategy):
    """Print notifications to stdout as plain text."""

    async def send_notification(self, message: NotificationMessage) -> None:
        if not self.is_running or not self.settings.console.enabled:
            return
        print(self._styler.render(message, parse_html=False))
