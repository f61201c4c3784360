# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/ and sql/."""

from polymarket_trade_monitor.persistence.repositories.interfaces.user_activity_repository import (
    IUserActivityRepository,
)

__all__ = ["IUserActivityRepository"]
