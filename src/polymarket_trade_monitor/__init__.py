"""Polymarket trade monitor: records new trades of a tracked account for downstream consumers."""

from polymarket_trade_monitor.clients import AsyncHttpClient, DataApiClient
from polymarket_trade_monitor.config import get_settings
from polymarket_trade_monitor.DI import Container
from polymarket_trade_monitor.models import UserActivity
from polymarket_trade_monitor.services import CycleResult, RecentTradeSet, TradeMonitor

__version__ = "0.1.0"
__all__ = [
    "AsyncHttpClient",
    "Container",
    "CycleResult",
    "DataApiClient",
    "RecentTradeSet",
    "TradeMonitor",
    "UserActivity",
    "get_settings",
]
