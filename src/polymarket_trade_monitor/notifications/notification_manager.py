"""Notification service: fan-out of messages to channels through a background worker."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog

from polymarket_trade_monitor.notifications.strategies import BaseNotificationStrategy
from polymarket_trade_monitor.notifications.types import NotificationMessage


@dataclass
class NotificationService:
    """Dispatch notifications to all configured channels without blocking the caller."""

    notifiers: list[BaseNotificationStrategy]
    queue_size: int = 1000
    get_logger: Callable[[str], Any] = field(default=structlog.get_logger)
    _queue: asyncio.Queue[NotificationMessage | None] | None = field(init=False, default=None)
    _worker_task: asyncio.Task[None] | None = field(init=False, default=None)
    _logger: Any = field(init=False)

    def __post_init__(self) -> None:
        self._logger = self.get_logger("NotificationService")

    @property
    def is_running(self) -> bool:
        return self._worker_task is not None

    async def initialize(self) -> None:
        """Initialize notifiers and start the delivery worker (no-op without notifiers)."""
        for notifier in self.notifiers:
            await notifier.initialize()
        if not self.notifiers:
            self._logger.info("notification_init_no_notifiers")
            return
        self._queue = asyncio.Queue(maxsize=self.queue_size)
        self._worker_task = asyncio.create_task(self._worker_loop())
        self._logger.debug(
            "notification_init_complete",
            notification_notifiers_count=len(self.notifiers),
            notification_queue_size=self.queue_size,
        )

    async def shutdown(self) -> None:
        """Drain pending messages, stop the worker and shut notifiers down."""
        if self._queue is not None and self._worker_task is not None:
            await self._queue.put(None)
            await self._worker_task
        self._queue = None
        self._worker_task = None
        for notifier in self.notifiers:
            await notifier.shutdown()
        self._logger.debug("notification_shutdown_complete")

    def notify(self, message: NotificationMessage) -> None:
        """Enqueue a notification. Dropped (and logged) if not running or the queue is full."""
        if self._queue is None:
            if self.notifiers:
                self._logger.warning(
                    "notification_not_running_dropped",
                    notification_event_type=message.event_type,
                )
            return
        try:
            self._queue.put_nowait(message)
        except asyncio.QueueFull:
            self._logger.warning(
                "notification_queue_full_dropped",
                notification_event_type=message.event_type,
            )

    async def _worker_loop(self) -> None:
        queue = self._queue
        if queue is None:
            return
        while True:
            msg = await queue.get()
            if msg is None:
                break
            await self._dispatch(msg)

    async def _dispatch(self, message: NotificationMessage) -> None:
        for notifier in self.notifiers:
            try:
                await notifier.send_notification(message)
            except Exception as e:
                self._logger.warning(
                    "notification_send_failed",
                    notification_event_type=message.event_type,
                    notification_channel=type(notifier).__name__,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
