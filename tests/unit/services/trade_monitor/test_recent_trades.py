# -*- coding: utf-8 -*-
"""Unit tests for RecentTradeSet."""

from __future__ import annotations

from polymarket_trade_monitor.models.user_activity import UserActivity
from polymarket_trade_monitor.services.trade_monitor import RecentTradeSet
from polymarket_trade_monitor.utils.dedupe import ActivityKey

NOW = 100_000


def _activity(tx: str, ts: int, cid: str = "c1") -> UserActivity:
    return UserActivity(transaction_hash=tx, timestamp=ts, condition_id=cid)


def test_add_and_contains_by_record_and_key() -> None:
    recent = RecentTradeSet(too_old_hours=1)
    activity = _activity("0xa", NOW - 10)

    assert recent.add(activity, NOW) is True

    assert recent.contains(activity)
    assert recent.contains(ActivityKey("0xa", NOW - 10, "c1"))
    assert activity in recent
    assert len(recent) == 1


def test_add_is_idempotent_for_same_key() -> None:
    recent = RecentTradeSet(too_old_hours=1)

    assert recent.add(_activity("0xa", NOW - 10), NOW) is True
    assert recent.add(_activity("0xa", NOW - 10), NOW) is False

    assert len(recent) == 1


def test_contains_distinguishes_each_identity_field() -> None:
    recent = RecentTradeSet(too_old_hours=1)
    recent.add(_activity("0xa", NOW - 10, "c1"), NOW)

    assert not recent.contains(ActivityKey("0xb", NOW - 10, "c1"))
    assert not recent.contains(ActivityKey("0xa", NOW - 11, "c1"))
    assert not recent.contains(ActivityKey("0xa", NOW - 10, "c2"))


def test_is_stale_boundary_is_inclusive() -> None:
    recent = RecentTradeSet(too_old_hours=2)

    assert recent.is_stale(NOW - 2 * 3600, NOW) is False
    assert recent.is_stale(NOW - 2 * 3600 - 1, NOW) is True


def test_add_ignores_already_stale_records() -> None:
    recent = RecentTradeSet(too_old_hours=1)

    assert recent.add(_activity("0xold", NOW - 3601), NOW) is False

    assert len(recent) == 0


def test_prune_drops_records_that_aged_out() -> None:
    recent = RecentTradeSet(too_old_hours=1)
    recent.add(_activity("0xa", NOW - 3000), NOW)
    recent.add(_activity("0xb", NOW - 10), NOW)

    removed = recent.prune(NOW + 700)

    assert removed == 1
    assert not recent.contains(ActivityKey("0xa", NOW - 3000, "c1"))
    assert recent.contains(ActivityKey("0xb", NOW - 10, "c1"))
    assert [a.transaction_hash for a in recent] == ["0xb"]
