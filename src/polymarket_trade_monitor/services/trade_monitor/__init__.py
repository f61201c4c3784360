"""Trade monitor: seed, fetch-filter-persist cycle and scheduler."""

from polymarket_trade_monitor.services.trade_monitor.recent_trades import RecentTradeSet
from polymarket_trade_monitor.services.trade_monitor.trade_monitor import CycleResult, TradeMonitor

__all__ = ["CycleResult", "RecentTradeSet", "TradeMonitor"]
