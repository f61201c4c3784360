# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, sql)."""

from polymarket_trade_monitor.persistence.repositories.interfaces import IUserActivityRepository
from polymarket_trade_monitor.persistence.repositories.in_memory import (
    InMemoryUserActivityRepository,
)
from polymarket_trade_monitor.persistence.repositories.sql import (
    DatabaseManager,
    SqlUserActivityRepository,
)

__all__ = [
    "DatabaseManager",
    "IUserActivityRepository",
    "InMemoryUserActivityRepository",
    "SqlUserActivityRepository",
]
