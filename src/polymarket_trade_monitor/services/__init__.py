# -*- coding: utf-8 -*-
"""Application services."""

from polymarket_trade_monitor.services.trade_monitor import CycleResult, RecentTradeSet, TradeMonitor

__all__ = [
    "CycleResult",
    "RecentTradeSet",
    "TradeMonitor",
]
