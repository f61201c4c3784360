"""Trade monitor: seeds recent trades, then polls the Data API and records new trades."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import structlog

from polymarket_trade_monitor.exceptions import (
    DuplicateActivityError,
    MissingRequiredConfigError,
    PolymarketAPIError,
    StateSeedError,
)
from polymarket_trade_monitor.models.user_activity import UserActivity
from polymarket_trade_monitor.notifications.types import NotificationMessage
from polymarket_trade_monitor.services.trade_monitor.recent_trades import RecentTradeSet
from polymarket_trade_monitor.utils.validation import mask_address

if TYPE_CHECKING:
    from polymarket_trade_monitor.clients.data_api import ActivitySchema, DataApiClient
    from polymarket_trade_monitor.config import Settings
    from polymarket_trade_monitor.notifications.notification_manager import NotificationService
    from polymarket_trade_monitor.persistence.repositories.interfaces import (
        IUserActivityRepository,
    )


@dataclass(frozen=True)
class CycleResult:
    """Outcome of one fetch-filter-persist cycle. Errors here are recoverable."""

    fetched: int = 0
    """Items returned by the Data API."""
    new_trades: int = 0
    """Items that passed the duplicate and staleness checks."""
    saved: int = 0
    failed: int = 0
    """New trades whose insert failed (already_stored included)."""
    already_stored: int = 0
    """New trades the store rejected as duplicates (written by another process)."""
    skipped_malformed: int = 0
    error: str | None = None
    """Set when the cycle stopped early (fetch failure or unexpected exception)."""

    @property
    def ok(self) -> bool:
        return self.error is None


class TradeMonitor:
    """Records new trades of one account from Data API polling into the activity store."""

    def __init__(
        self,
        settings: Settings,
        data_api: DataApiClient,
        activity_repository: IUserActivityRepository,
        notification_service: NotificationService | None = None,
        *,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the monitor.

        Args:
            settings: Application settings (uses settings.monitor).
            data_api: Data API client (injected).
            activity_repository: Durable trade store (injected).
            notification_service: Optional; receives a trade_new message per recorded trade.
            clock: Current unix time in seconds (injected for tests).
            sleep: Coroutine used between cycles (injected for tests).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._data_api = data_api
        self._repo = activity_repository
        self._notification_service = notification_service
        self._clock = clock
        self._sleep = sleep
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def account(self) -> str:
        return self._settings.monitor.user_address.strip()

    def _now(self) -> int:
        return int(self._clock())

    async def run(self) -> None:
        """Seed recent trades, then poll forever every monitor.fetch_interval_seconds.

        Only returns by cancellation of the calling task.

        Raises:
            MissingRequiredConfigError: If monitor.user_address is empty.
            StateSeedError: If stored trades cannot be loaded.
        """
        account = self.account
        if not account:
            self._logger.error(
                "trade_monitor_missing_user_address",
                message="MONITOR__USER_ADDRESS is not set",
            )
            raise MissingRequiredConfigError("MONITOR__USER_ADDRESS")

        recent = await self.seed(account)

        interval = self._settings.monitor.fetch_interval_seconds
        self._logger.info(
            "trade_monitor_running",
            monitor_wallet_masked=mask_address(account),
            monitor_fetch_interval_seconds=interval,
            monitor_too_old_hours=self._settings.monitor.too_old_hours,
        )
        while True:
            await self.poll_once(recent)
            await self._sleep(interval)

    async def seed(self, account: str | None = None) -> RecentTradeSet:
        """Load stored trades for the account into a new RecentTradeSet.

        Raises:
            StateSeedError: If the store cannot be read.
        """
        account = account or self.account
        try:
            stored = await self._repo.find_all(account)
        except Exception as e:
            self._logger.exception(
                "trade_monitor_seed_failed",
                monitor_wallet_masked=mask_address(account),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise StateSeedError(
                f"could not load stored trades: {e}", account=account, cause=e
            ) from e

        recent = RecentTradeSet(self._settings.monitor.too_old_hours)
        now = self._now()
        for activity in stored:
            recent.add(activity, now)
        self._logger.info(
            "trade_monitor_seeded",
            monitor_wallet_masked=mask_address(account),
            monitor_stored_count=len(stored),
            monitor_recent_count=len(recent),
        )
        return recent

    def select_new(
        self,
        activities: Sequence[UserActivity],
        recent: RecentTradeSet,
        now: int,
    ) -> list[UserActivity]:
        """Keep activities that are neither already recorded nor stale, in feed order.

        Repeats of the same key inside one response are kept once.
        """
        seen_in_batch: set[tuple[str, int, str]] = set()
        new: list[UserActivity] = []
        for activity in activities:
            key = activity.key
            if key in seen_in_batch or recent.contains(key):
                continue
            if recent.is_stale(activity.timestamp, now):
                continue
            seen_in_batch.add(key)
            new.append(activity)
        return new

    async def poll_once(self, recent: RecentTradeSet) -> CycleResult:
        """Run one fetch-filter-persist cycle. Never raises (except on cancellation)."""
        try:
            return await self._poll(recent)
        except Exception as e:
            self._logger.exception(
                "trade_monitor_cycle_failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return CycleResult(error=f"{type(e).__name__}: {e}")

    def _parse(self, raw: Sequence[ActivitySchema]) -> tuple[list[UserActivity], int]:
        activities: list[UserActivity] = []
        malformed = 0
        for item in raw:
            try:
                activities.append(UserActivity.from_response(cast(dict[str, Any], item)))
            except (TypeError, ValueError) as e:
                malformed += 1
                self._logger.warning(
                    "trade_monitor_malformed_activity",
                    error_message=str(e),
                    activity=dict(item),
                )
        return activities, malformed

    async def _poll(self, recent: RecentTradeSet) -> CycleResult:
        account = self.account
        try:
            raw = await self._data_api.get_activity(account, activity_type="TRADE")
        except PolymarketAPIError as e:
            self._logger.warning(
                "trade_monitor_fetch_failed",
                monitor_wallet_masked=mask_address(account),
                error_type=type(e).__name__,
                error_message=str(e),
                http_status_code=e.status_code,
            )
            return CycleResult(error=str(e))
        if not raw:
            return CycleResult()

        activities, malformed = self._parse(raw)
        now = self._now()
        new = self.select_new(activities, recent, now)
        recent.prune(now)
        if not new:
            return CycleResult(fetched=len(raw), skipped_malformed=malformed)

        self._logger.info(
            "trade_monitor_new_trades_found",
            message=f"Found {len(new)} new trade(s) from user {mask_address(account)}",
            monitor_wallet_masked=mask_address(account),
            monitor_new_trades_count=len(new),
        )

        saved = failed = already_stored = 0
        for activity in new:
            record = activity.enriched()
            try:
                await self._repo.insert(account, record)
            except DuplicateActivityError as e:
                # Stored by someone else: remember it so it is not retried every cycle.
                failed += 1
                already_stored += 1
                recent.add(record, now)
                self._logger.warning(
                    "trade_monitor_trade_already_stored",
                    trade_transaction_hash=record.transaction_hash,
                    error_message=str(e),
                )
                continue
            except Exception as e:
                failed += 1
                self._logger.error(
                    "trade_monitor_trade_save_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                    trade=record.to_document(),
                )
                continue

            recent.add(record, now)
            saved += 1
            self._logger.info(
                "trade_monitor_trade_saved",
                message=f"New trade saved: {record.type} {record.side} {record.size} @ {record.price}",
                trade_type=record.type,
                trade_side=record.side,
                trade_size=record.size,
                trade_price=record.price,
                trade_title=record.title,
                trade_transaction_hash=record.transaction_hash,
            )
            self._notify_saved(account, record)

        return CycleResult(
            fetched=len(raw),
            new_trades=len(new),
            saved=saved,
            failed=failed,
            already_stored=already_stored,
            skipped_malformed=malformed,
        )

    def _notify_saved(self, account: str, record: UserActivity) -> None:
        if self._notification_service is None:
            return
        self._notification_service.notify(
            NotificationMessage(
                event_type="trade_new",
                message=f"{record.side or ''} {record.size} @ {record.price}".strip(),
                payload={"wallet": mask_address(account), "trade": record.to_document()},
            )
        )
