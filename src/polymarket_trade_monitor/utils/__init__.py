# -*- coding: utf-8 -*-
"""Utility modules."""

from polymarket_trade_monitor.utils.dedupe import ActivityKey, activity_key
from polymarket_trade_monitor.utils.validation import is_hex_address, mask_address

__all__ = ["ActivityKey", "activity_key", "is_hex_address", "mask_address"]
