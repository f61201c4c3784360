"""Dependency injection."""

from polymarket_trade_monitor.DI.container import Container

__all__ = ["Container"]
