"""Exceptions subpackage."""

from polymarket_trade_monitor.exceptions.exceptions import (
    DuplicateActivityError,
    MissingRequiredConfigError,
    PersistenceError,
    PolymarketAPIError,
    PolymarketError,
    RateLimitError,
    StateSeedError,
)

__all__ = [
    "DuplicateActivityError",
    "MissingRequiredConfigError",
    "PersistenceError",
    "PolymarketError",
    "PolymarketAPIError",
    "RateLimitError",
    "StateSeedError",
]
