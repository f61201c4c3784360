# -*- coding: utf-8 -*-
"""Telegram notification channel (python-telegram-bot, async)."""

from __future__ import annotations

import asyncio
import time
from collections import deque
from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog
from telegram import Bot
from telegram.error import BadRequest, Forbidden, RetryAfter, TelegramError
from telegram.request import HTTPXRequest

from polymarket_trade_monitor.notifications.strategies.base import BaseNotificationStrategy
from polymarket_trade_monitor.notifications.types import NotificationMessage

if TYPE_CHECKING:
    from polymarket_trade_monitor.config.config import Settings
    from polymarket_trade_monitor.notifications.types import NotificationStyler


class TelegramNotifier(BaseNotificationStrategy):
    """Send HTML-formatted notifications to one Telegram chat, rate limited per minute."""

    def __init__(
        self,
        settings: "Settings",
        styler: "NotificationStyler",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings, styler)
        self._logger = get_logger(logger_name or self.__class__.__name__)
        cfg = settings.telegram
        if not cfg.api_key or not cfg.chat_id:
            raise ValueError("TelegramNotifier requires TELEGRAM__API_KEY and TELEGRAM__CHAT_ID.")
        self._token = cfg.api_key
        self._chat_id = cfg.chat_id
        self._bot: Optional[Bot] = None
        self._sent_at: deque[float] = deque()

    async def initialize(self) -> None:
        if self._running:
            return
        cfg = self.settings.telegram
        request = HTTPXRequest(
            connect_timeout=cfg.connect_timeout,
            read_timeout=cfg.read_timeout,
        )
        self._bot = Bot(token=self._token, request=request)
        self._running = True

    async def shutdown(self) -> None:
        self._bot = None
        self._running = False

    async def send_notification(self, message: NotificationMessage) -> None:
        if not self._running or self._bot is None:
            self._logger.warning("telegram_not_running_cannot_send")
            return
        await self._wait_for_rate_limit()
        await self._send_with_retries(self._styler.render(message, parse_html=True))

    def _backoff(self, attempt: int) -> float:
        return min(60.0, self.settings.telegram.backoff_base_seconds * (2 ** (attempt - 1)))

    async def _send_with_retries(self, text: str) -> None:
        assert self._bot is not None
        max_attempts = self.settings.telegram.max_retries + 1
        for attempt in range(1, max_attempts + 1):
            try:
                await self._bot.send_message(chat_id=self._chat_id, text=text, parse_mode="HTML")
                self._sent_at.append(time.monotonic())
                return
            except RetryAfter as e:
                retry_after: Any = getattr(e, "retry_after", 1.0)
                delay = (
                    retry_after.total_seconds()
                    if hasattr(retry_after, "total_seconds")
                    else float(retry_after)
                )
            except (BadRequest, Forbidden) as e:
                self._logger.error(
                    "telegram_message_rejected",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                return
            except TelegramError as e:
                delay = self._backoff(attempt)
                self._logger.warning(
                    "telegram_send_retry",
                    error_type=type(e).__name__,
                    attempt=attempt,
                    backoff_seconds=delay,
                )
            if attempt < max_attempts:
                await asyncio.sleep(delay)
        self._logger.error("telegram_max_retries_exceeded_message_dropped")

    async def _wait_for_rate_limit(self) -> None:
        limit = self.settings.telegram.messages_per_minute
        now = time.monotonic()
        while self._sent_at and self._sent_at[0] < now - 60:
            self._sent_at.popleft()
        if len(self._sent_at) >= limit:
            await asyncio.sleep(60 - (now - self._sent_at[0]))
