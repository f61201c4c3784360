# -*- coding: utf-8 -*-
"""
Entry point for the trade monitor.

Orchestrates: logging, settings, container, schema init, notifications, monitor task,
shutdown (SIGINT or CancelledError).
Trades flow: Data API /activity -> TradeMonitor (dedupe + staleness) -> user_activities store.

Run with: python -m polymarket_trade_monitor.main
"""
from __future__ import annotations

import asyncio
import signal
import structlog
from typing import Any

from polymarket_trade_monitor.DI import Container
from polymarket_trade_monitor.exceptions import MissingRequiredConfigError
from polymarket_trade_monitor.logging.config import configure_logging
from polymarket_trade_monitor.notifications.types import NotificationMessage
from polymarket_trade_monitor.utils import is_hex_address, mask_address


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(signal.SIGINT, shutdown_event.set)
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


async def _wait_for_shutdown(monitor_task: asyncio.Task[None], shutdown_event: asyncio.Event) -> None:
    """Return when SIGINT is received; re-raise if the monitor task dies (fatal startup errors)."""
    shutdown_task = asyncio.create_task(shutdown_event.wait())
    try:
        await asyncio.wait({monitor_task, shutdown_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        shutdown_task.cancel()
    if monitor_task.done():
        monitor_task.result()


async def run(container: Container | None = None) -> None:
    configure_logging()
    logger: Any = structlog.get_logger("main")
    container = container or Container()
    settings = container.config()
    user_address = settings.monitor.user_address.strip()
    if not user_address:
        logger.error(
            "main_missing_user_address",
            message="MONITOR__USER_ADDRESS is not set",
        )
        raise MissingRequiredConfigError("MONITOR__USER_ADDRESS")
    if not is_hex_address(user_address):
        logger.warning("main_user_address_not_hex", user_address=user_address)

    database = container.database_manager()
    http_client = container.http_client()
    monitor = container.trade_monitor()
    notification_service = container.notification_service()

    monitor_task: asyncio.Task[None] | None = None
    try:
        await database.init_schema_async()
        await notification_service.initialize()
        shutdown_event = asyncio.Event()
        _setup_sigint(shutdown_event)

        logger.info(
            "main_monitor_started",
            monitor_wallet_masked=mask_address(user_address),
            monitor_fetch_interval_seconds=settings.monitor.fetch_interval_seconds,
            monitor_too_old_hours=settings.monitor.too_old_hours,
        )
        notification_service.notify(
            NotificationMessage(
                event_type="system_started",
                message=f"Trade monitor is running every {settings.monitor.fetch_interval_seconds} seconds",
                payload={"wallet": mask_address(user_address)},
            )
        )

        monitor_task = asyncio.create_task(monitor.run())
        await _wait_for_shutdown(monitor_task, shutdown_event)
    finally:
        if monitor_task is not None:
            if not monitor_task.done():
                monitor_task.cancel()
                try:
                    await monitor_task
                except asyncio.CancelledError:
                    pass
            notification_service.notify(
                NotificationMessage(
                    event_type="system_stopped",
                    message="Trade monitor stopped",
                )
            )
        await notification_service.shutdown()
        await http_client.aclose()
        await database.dispose_async()
        logger.info("main_shutdown_complete")


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
