"""SQLAlchemy (async) repository implementations."""

from polymarket_trade_monitor.persistence.repositories.sql.database import (
    DatabaseManager,
    normalize_async_database_url,
)
from polymarket_trade_monitor.persistence.repositories.sql.models import Base, UserActivityModel
from polymarket_trade_monitor.persistence.repositories.sql.user_activity_repository import (
    SqlUserActivityRepository,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "SqlUserActivityRepository",
    "UserActivityModel",
    "normalize_async_database_url",
]
