"""In-memory repository implementations."""

from polymarket_trade_monitor.persistence.repositories.in_memory.user_activity_repository import (
    InMemoryUserActivityRepository,
)

__all__ = ["InMemoryUserActivityRepository"]
