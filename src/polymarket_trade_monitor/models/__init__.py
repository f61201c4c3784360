# -*- coding: utf-8 -*-
"""Domain models."""

from polymarket_trade_monitor.models.user_activity import TradeSide, UserActivity

__all__ = ["TradeSide", "UserActivity"]
