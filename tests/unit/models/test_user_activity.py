# -*- coding: utf-8 -*-
"""Unit tests for the UserActivity model."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from polymarket_trade_monitor.models.user_activity import UserActivity


def test_from_response_maps_camel_case_fields(
    activity_factory: Callable[..., dict[str, Any]],
) -> None:
    raw = activity_factory(size="25.5", price="0.42", outcomeIndex="1")

    activity = UserActivity.from_response(raw)

    assert activity.transaction_hash == raw["transactionHash"]
    assert activity.condition_id == raw["conditionId"]
    assert activity.timestamp == raw["timestamp"]
    assert activity.size == Decimal("25.5")
    assert activity.price == Decimal("0.42")
    assert activity.usdc_size == Decimal("12.5")
    assert activity.outcome_index == 1
    assert activity.event_slug == "weather"
    assert activity.profile_image_optimized == "https://example.com/p-opt.png"
    assert activity.actioned is False
    assert activity.action_count == 0


def test_from_response_raises_without_transaction_hash(
    activity_factory: Callable[..., dict[str, Any]],
) -> None:
    with pytest.raises(ValueError):
        UserActivity.from_response(activity_factory(transactionHash=None))


def test_enriched_fills_empty_string_defaults(
    activity_factory: Callable[..., dict[str, Any]],
) -> None:
    raw = activity_factory(
        eventSlug=None, bio=None, profileImage=None, profileImageOptimized=None
    )

    record = UserActivity.from_response(raw).enriched()

    assert record.event_slug == ""
    assert record.bio == ""
    assert record.profile_image_optimized == ""


def test_enriched_falls_back_to_plain_profile_image(
    activity_factory: Callable[..., dict[str, Any]],
) -> None:
    raw = activity_factory(profileImageOptimized=None, profileImage="https://example.com/plain.png")

    record = UserActivity.from_response(raw).enriched()

    assert record.profile_image_optimized == "https://example.com/plain.png"


def test_enriched_resets_bookkeeping_fields() -> None:
    activity = UserActivity("0xa", 1, "c1", actioned=True, action_count=3)

    record = activity.enriched()

    assert record.actioned is False
    assert record.action_count == 0
    assert record.key == activity.key


def test_to_document_uses_api_keys() -> None:
    record = UserActivity(
        "0xa", 1000, "c1", side="SELL", size=Decimal("3"), price=Decimal("0.1")
    ).enriched()

    doc = record.to_document()

    assert doc["transactionHash"] == "0xa"
    assert doc["conditionId"] == "c1"
    assert doc["price"] == Decimal("0.1")
    assert doc["bot"] is False
    assert doc["botExecutedTime"] == 0


def test_from_response_keeps_float_amounts_exact(
    activity_factory: Callable[..., dict[str, Any]],
) -> None:
    activity = UserActivity.from_response(activity_factory(price=0.1, size=0.3))

    assert activity.price == Decimal("0.1")
    assert activity.size == Decimal("0.3")


def test_from_response_rejects_non_numeric_amount(
    activity_factory: Callable[..., dict[str, Any]],
) -> None:
    with pytest.raises(ValueError):
        UserActivity.from_response(activity_factory(size="lots"))
