"""Bounded in-memory set of recently recorded trades (duplicate fast path)."""

from __future__ import annotations

import heapq
from collections.abc import Iterator

from polymarket_trade_monitor.models.user_activity import UserActivity
from polymarket_trade_monitor.utils.dedupe import ActivityKey


class RecentTradeSet:
    """Recorded trades still young enough to pass the staleness check.

    A trade older than ``too_old_hours`` can never be recorded again, so it is
    pruned: the set only ever holds trades within the staleness window.
    All methods take ``now`` (unix seconds) from the caller's clock.
    """

    def __init__(self, too_old_hours: float) -> None:
        self._too_old_hours = too_old_hours
        self._records: dict[ActivityKey, UserActivity] = {}
        self._by_timestamp: list[tuple[int, ActivityKey]] = []

    @property
    def too_old_hours(self) -> float:
        return self._too_old_hours

    def is_stale(self, timestamp: int, now: int) -> bool:
        """True if a trade at ``timestamp`` is older than the threshold. The boundary is not stale."""
        return (now - timestamp) / 3600 > self._too_old_hours

    def add(self, activity: UserActivity, now: int) -> bool:
        """Remember a recorded trade. Returns False if already present or already stale."""
        self.prune(now)
        key = activity.key
        if key in self._records or self.is_stale(activity.timestamp, now):
            return False
        self._records[key] = activity
        heapq.heappush(self._by_timestamp, (activity.timestamp, key))
        return True

    def contains(self, item: UserActivity | ActivityKey) -> bool:
        key = item.key if isinstance(item, UserActivity) else item
        return key in self._records

    def prune(self, now: int) -> int:
        """Drop stale trades; returns how many were removed."""
        removed = 0
        while self._by_timestamp and self.is_stale(self._by_timestamp[0][0], now):
            _, key = heapq.heappop(self._by_timestamp)
            if self._records.pop(key, None) is not None:
                removed += 1
        return removed

    def __contains__(self, item: object) -> bool:
        if isinstance(item, (UserActivity, tuple)):
            return self.contains(item)  # type: ignore[arg-type]
        return False

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[UserActivity]:
        return iter(list(self._records.values()))
