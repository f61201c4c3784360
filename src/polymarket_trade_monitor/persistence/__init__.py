"""Persistence layer (repositories, database)."""

from polymarket_trade_monitor.persistence.repositories import (
    DatabaseManager,
    InMemoryUserActivityRepository,
    IUserActivityRepository,
    SqlUserActivityRepository,
)

__all__ = [
    "DatabaseManager",
    "IUserActivityRepository",
    "InMemoryUserActivityRepository",
    "SqlUserActivityRepository",
]
