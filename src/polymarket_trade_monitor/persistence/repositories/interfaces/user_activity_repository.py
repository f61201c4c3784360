"""Abstract interface for trade activity storage (in-memory, SQL, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from polymarket_trade_monitor.models.user_activity import UserActivity


class IUserActivityRepository(ABC):
    """Interface for persisting recorded trades of a tracked account.

    Records are unique per account on (transaction_hash, timestamp, condition_id).
    """

    @abstractmethod
    async def find_all(self, account: str) -> list[UserActivity]:
        """Return every stored activity for the account (no particular order).

        Raises:
            PersistenceError: If the store cannot be read.
        """
        ...

    @abstractmethod
    async def insert(self, account: str, activity: UserActivity) -> None:
        """Store one activity for the account.

        Raises:
            DuplicateActivityError: If an activity with the same key is already stored.
            PersistenceError: If the write fails.
        """
        ...
