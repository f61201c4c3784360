"""Polymarket Data API client and response schemas."""

from polymarket_trade_monitor.clients.data_api.data_api import DataApiClient
from polymarket_trade_monitor.clients.data_api.schema import ActivitySchema, ActivityType

__all__ = ["ActivitySchema", "ActivityType", "DataApiClient"]
