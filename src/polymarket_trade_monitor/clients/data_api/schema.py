"""Data API response types (OpenAPI schema alignment)."""

from __future__ import annotations

from typing import Literal, TypedDict

ActivityType = Literal["TRADE", "SPLIT", "MERGE", "REDEEM", "REWARD", "CONVERSION"]


class ActivitySchema(TypedDict, total=False):
    """GET /activity item (Activity schema). Keys match API response (camelCase)."""

    proxyWallet: str
    timestamp: int
    conditionId: str
    type: ActivityType
    size: float
    usdcSize: float
    transactionHash: str
    price: float
    asset: str
    side: Literal["BUY", "SELL"]
    outcomeIndex: int
    title: str
    slug: str
    icon: str
    eventSlug: str
    outcome: str
    name: str
    pseudonym: str
    bio: str
    profileImage: str
    profileImageOptimized: str
