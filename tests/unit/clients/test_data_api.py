# -*- coding: utf-8 -*-
"""Unit tests for DataApiClient."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, cast
from unittest.mock import AsyncMock

from polymarket_trade_monitor.clients.data_api import DataApiClient
from polymarket_trade_monitor.config import Settings


async def test_get_activity_requests_trade_activity(settings: Settings, wallet: str) -> None:
    http = SimpleNamespace(get=AsyncMock(return_value=[{"transactionHash": "0xa"}]))
    client = DataApiClient(http_client=cast(Any, http), settings=settings)

    items = await client.get_activity(wallet)

    assert items == [{"transactionHash": "0xa"}]
    http.get.assert_awaited_once_with(
        "https://data-api.polymarket.com/activity",
        params={
            "user": wallet,
            "type": "TRADE",
            "limit": settings.api.activity_limit,
            "offset": 0,
        },
    )


async def test_get_activity_returns_empty_list_for_non_list_body(
    settings: Settings, wallet: str
) -> None:
    http = SimpleNamespace(get=AsyncMock(return_value={"error": "bad user"}))
    client = DataApiClient(http_client=cast(Any, http), settings=settings)

    assert await client.get_activity(wallet) == []


async def test_get_activity_drops_non_dict_items(settings: Settings, wallet: str) -> None:
    http = SimpleNamespace(get=AsyncMock(return_value=[{"a": 1}, "junk", None, 3]))
    client = DataApiClient(http_client=cast(Any, http), settings=settings)

    assert await client.get_activity(wallet, limit=5) == [{"a": 1}]
    assert http.get.await_args.kwargs["params"]["limit"] == 5
