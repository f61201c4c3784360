# -*- coding: utf-8 -*-
"""Base notification channel."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from polymarket_trade_monitor.notifications.types import NotificationMessage

if TYPE_CHECKING:  # pragma: no cover
    from polymarket_trade_monitor.config.config import Settings
    from polymarket_trade_monitor.notifications.types import NotificationStyler


class BaseNotificationStrategy(ABC):
    """A delivery channel for NotificationMessage (console, Telegram, ...)."""

    def __init__(self, settings: "Settings", styler: "NotificationStyler") -> None:
        self.settings = settings
        self._styler = styler
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    @abstractmethod
    async def send_notification(self, message: NotificationMessage) -> None:
        """Deliver one message through this channel."""
        ...
