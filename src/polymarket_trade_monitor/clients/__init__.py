"""HTTP and API clients."""

from polymarket_trade_monitor.clients.data_api import DataApiClient
from polymarket_trade_monitor.clients.http import AsyncHttpClient

__all__ = [
    "AsyncHttpClient",
    "DataApiClient",
]
