# -*- coding: utf-8 -*-
"""UserActivity: one TRADE item of the tracked account, as recorded in the store.

Identity is (transaction_hash, timestamp, condition_id); see utils.dedupe.ActivityKey.
The ``actioned`` / ``action_count`` fields do not come from the Data API: they are
set at ingestion time and later updated by whatever consumes the store.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Literal

from polymarket_trade_monitor.utils.dedupe import ActivityKey, activity_key

TradeSide = Literal["BUY", "SELL"]

# snake_case attribute -> camelCase key used by the Data API and the stored document
_DOCUMENT_KEYS: dict[str, str] = {
    "transaction_hash": "transactionHash",
    "timestamp": "timestamp",
    "condition_id": "conditionId",
    "type": "type",
    "side": "side",
    "size": "size",
    "usdc_size": "usdcSize",
    "price": "price",
    "asset": "asset",
    "outcome": "outcome",
    "outcome_index": "outcomeIndex",
    "title": "title",
    "slug": "slug",
    "icon": "icon",
    "event_slug": "eventSlug",
    "proxy_wallet": "proxyWallet",
    "name": "name",
    "pseudonym": "pseudonym",
    "bio": "bio",
    "profile_image": "profileImage",
    "profile_image_optimized": "profileImageOptimized",
    "actioned": "bot",
    "action_count": "botExecutedTime",
}


def _opt_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"not a number: {value!r}") from e


def _opt_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True, slots=True)
class UserActivity:
    """A trade activity of the tracked account (Data API GET /activity, type=TRADE)."""

    transaction_hash: str
    timestamp: int
    """Unix timestamp (seconds) of the trade, as reported by the Data API."""
    condition_id: str

    type: str = "TRADE"
    side: TradeSide | None = None
    size: Decimal | None = None
    usdc_size: Decimal | None = None
    price: Decimal | None = None
    asset: str | None = None
    outcome: str | None = None
    outcome_index: int | None = None
    title: str | None = None
    slug: str | None = None
    icon: str | None = None
    event_slug: str | None = None
    proxy_wallet: str | None = None
    name: str | None = None
    pseudonym: str | None = None
    bio: str | None = None
    profile_image: str | None = None
    profile_image_optimized: str | None = None

    actioned: bool = False
    """Whether a downstream consumer has acted on this trade."""
    action_count: int = 0
    """How many times a downstream consumer has acted on this trade."""

    @property
    def key(self) -> ActivityKey:
        return ActivityKey(self.transaction_hash, self.timestamp, self.condition_id)

    def enriched(self) -> UserActivity:
        """Copy ready to be stored: empty-string defaults and fresh bookkeeping fields."""
        return replace(
            self,
            event_slug=self.event_slug or "",
            bio=self.bio or "",
            profile_image_optimized=self.profile_image_optimized or self.profile_image or "",
            actioned=False,
            action_count=0,
        )

    def to_document(self) -> dict[str, Any]:
        """CamelCase dict, as logged and notified (Data API keys plus bot/botExecutedTime)."""
        return {_DOCUMENT_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> UserActivity:
        """Build from a raw GET /activity item (camelCase).

        Raises:
            ValueError: If an identity field is missing or a numeric field cannot be parsed.
        """
        k = activity_key(response)
        return cls(
            transaction_hash=k.transaction_hash,
            timestamp=k.timestamp,
            condition_id=k.condition_id,
            type=str(response.get("type") or "TRADE"),
            side=response.get("side"),
            size=_opt_decimal(response.get("size")),
            usdc_size=_opt_decimal(response.get("usdcSize")),
            price=_opt_decimal(response.get("price")),
            asset=_opt_str(response.get("asset")),
            outcome=response.get("outcome"),
            outcome_index=_opt_int(response.get("outcomeIndex")),
            title=response.get("title"),
            slug=response.get("slug"),
            icon=response.get("icon"),
            event_slug=response.get("eventSlug"),
            proxy_wallet=response.get("proxyWallet"),
            name=response.get("name"),
            pseudonym=response.get("pseudonym"),
            bio=response.get("bio"),
            profile_image=response.get("profileImage"),
            profile_image_optimized=response.get("profileImageOptimized"),
        )
