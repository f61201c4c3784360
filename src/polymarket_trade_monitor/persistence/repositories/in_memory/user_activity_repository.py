# -*- coding: utf-8 -*-
"""In-memory user activity repository (keyed by account, then activity key)."""

from __future__ import annotations

from polymarket_trade_monitor.exceptions import DuplicateActivityError
from polymarket_trade_monitor.models.user_activity import UserActivity
from polymarket_trade_monitor.persistence.repositories.interfaces.user_activity_repository import (
    IUserActivityRepository,
)
from polymarket_trade_monitor.utils.dedupe import ActivityKey


class InMemoryUserActivityRepository(IUserActivityRepository):
    """In-memory implementation of IUserActivityRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[str, dict[ActivityKey, UserActivity]] = {}

    async def find_all(self, account: str) -> list[UserActivity]:
        return list(self._store.get(account.strip(), {}).values())

    async def insert(self, account: str, activity: UserActivity) -> None:
        """Store the activity; raises DuplicateActivityError if its key is already present."""
        records = self._store.setdefault(account.strip(), {})
        if activity.key in records:
            raise DuplicateActivityError(
                f"activity already stored: {activity.transaction_hash}"
            )
        records[activity.key] = activity
