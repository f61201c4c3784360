# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from polymarket_trade_monitor.clients.data_api import DataApiClient
from polymarket_trade_monitor.clients.http import AsyncHttpClient
from polymarket_trade_monitor.config import Settings, get_settings
from polymarket_trade_monitor.notifications.notification_manager import NotificationService
from polymarket_trade_monitor.notifications.strategies.base import BaseNotificationStrategy
from polymarket_trade_monitor.notifications.strategies.console import ConsoleNotifier
from polymarket_trade_monitor.notifications.strategies.telegram import TelegramNotifier
from polymarket_trade_monitor.notifications.stylers.notification_styler import (
    TradeNotificationStyler,
)
from polymarket_trade_monitor.persistence.repositories.sql import (
    DatabaseManager,
    SqlUserActivityRepository,
)
from polymarket_trade_monitor.services.trade_monitor import TradeMonitor


def _build_notification_notifiers(
    settings: Settings,
    styler: TradeNotificationStyler,
) -> list[BaseNotificationStrategy]:
    notifiers: list[BaseNotificationStrategy] = []
    if settings.console.enabled:
        notifiers.append(ConsoleNotifier(settings=settings, styler=styler))
    if settings.telegram.enabled:
        notifiers.append(TelegramNotifier(settings=settings, styler=styler))
    return notifiers


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP/Data API clients, store, notifications, monitor."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    data_api_client = providers.Singleton(
        DataApiClient,
        http_client=http_client,
        settings=config,
    )

    database_manager = providers.Singleton(
        DatabaseManager,
        settings=config,
    )

    user_activity_repository = providers.Singleton(
        SqlUserActivityRepository,
        database=database_manager,
    )

    notification_styler = providers.Singleton(TradeNotificationStyler)

    notification_service = providers.Singleton(
        NotificationService,
        notifiers=providers.Callable(_build_notification_notifiers, config, notification_styler),
    )

    trade_monitor = providers.Singleton(
        TradeMonitor,
        settings=config,
        data_api=data_api_client,
        activity_repository=user_activity_repository,
        notification_service=notification_service,
    )
