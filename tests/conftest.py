# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from polymarket_trade_monitor.config import Settings
from polymarket_trade_monitor.persistence.repositories.in_memory import (
    InMemoryUserActivityRepository,
)


@pytest.fixture
def wallet() -> str:
    """Default tracked wallet used by tests."""
    return "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706"


@pytest.fixture
def now_ts() -> int:
    """Stable unix time (seconds) for deterministic staleness checks."""
    return 1_760_000_000


@pytest.fixture
def settings_factory(wallet: str) -> Callable[..., Settings]:
    """Build Settings with a monitor section; overrides go into monitor.*."""

    def _build(**monitor_overrides: Any) -> Settings:
        monitor: dict[str, Any] = {
            "user_address": wallet,
            "too_old_hours": 1.0,
            "fetch_interval_seconds": 1.0,
        }
        monitor.update(monitor_overrides)
        return Settings(monitor=monitor)

    return _build


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory()


@pytest.fixture
def activity_factory(wallet: str, now_ts: int) -> Callable[..., dict[str, Any]]:
    """Build a raw GET /activity TRADE item (camelCase) with easy overrides."""

    def _build(**overrides: Any) -> dict[str, Any]:
        item: dict[str, Any] = {
            "proxyWallet": wallet,
            "timestamp": now_ts - 60,
            "conditionId": "0x" + "c" * 64,
            "type": "TRADE",
            "size": 25.0,
            "usdcSize": 12.5,
            "transactionHash": "0x" + "a" * 64,
            "price": 0.5,
            "asset": "1234567890",
            "side": "BUY",
            "outcomeIndex": 0,
            "title": "Will it rain tomorrow?",
            "slug": "will-it-rain-tomorrow",
            "icon": "https://example.com/icon.png",
            "eventSlug": "weather",
            "outcome": "Yes",
            "name": "trader",
            "pseudonym": "Quiet-Trader",
            "bio": "hello",
            "profileImage": "https://example.com/p.png",
            "profileImageOptimized": "https://example.com/p-opt.png",
        }
        for key, value in overrides.items():
            if value is None:
                item.pop(key, None)
            else:
                item[key] = value
        return item

    return _build


@pytest.fixture
def activity_repo() -> InMemoryUserActivityRepository:
    """Fresh in-memory activity repository per test."""
    return InMemoryUserActivityRepository()
