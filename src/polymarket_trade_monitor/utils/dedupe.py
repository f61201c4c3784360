"""Deduplication key for trade activities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple


class ActivityKey(NamedTuple):
    """Identity of a trade: unique per tracked account."""

    transaction_hash: str
    timestamp: int
    condition_id: str


def activity_key(t: Mapping[str, Any]) -> ActivityKey:
    """Return the identity key of a raw Data API activity item (camelCase keys).

    Raises:
        ValueError: If transactionHash, timestamp or conditionId is missing or empty.
    """
    tx = t.get("transactionHash")
    cid = t.get("conditionId")
    ts = t.get("timestamp")
    if not isinstance(tx, str) or not tx:
        raise ValueError("activity has no transactionHash")
    if not isinstance(cid, str) or not cid:
        raise ValueError("activity has no conditionId")
    if ts is None or isinstance(ts, bool):
        raise ValueError("activity has no timestamp")
    try:
        timestamp = int(ts)
    except (TypeError, ValueError) as e:
        raise ValueError(f"activity timestamp is not an integer: {ts!r}") from e
    return ActivityKey(transaction_hash=tx, timestamp=timestamp, condition_id=cid)
