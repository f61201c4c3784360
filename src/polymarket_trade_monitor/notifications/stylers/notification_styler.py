# -*- coding: utf-8 -*-
"""Notification styler for recorded trades and system lifecycle events."""

from __future__ import annotations

import html
from datetime import datetime, timezone
from typing import Any, cast

from polymarket_trade_monitor.notifications.types import NotificationMessage, NotificationStyler

_TITLES: dict[str, tuple[str, str]] = {
    "trade_new": ("🆕", "New Trade"),
    "system_started": ("▶️", "Trade Monitor Started"),
    "system_stopped": ("⏹️", "Trade Monitor Stopped"),
}


class TradeNotificationStyler(NotificationStyler):
    """Render notifications by event_type; HTML (Telegram) or plain text (console)."""

    def render(self, message: NotificationMessage, *, parse_html: bool = False) -> str:
        emoji, title = _TITLES.get(
            message.event_type, ("ℹ️", message.event_type.replace("_", " ").title())
        )
        if message.event_type == "trade_new":
            rows = self._trade_rows(message)
        else:
            rows = [("", message.message)]
            for key, value in sorted((message.payload or {}).items()):
                if value is not None and not isinstance(value, dict):
                    rows.append((key, value))

        heading = f"{emoji} {title}"
        lines = [self._bold(heading, parse_html)]
        for label, value in rows:
            if value is None or value == "":
                continue
            text = self._escape(str(value), parse_html)
            lines.append(f"{self._bold(label + ':', parse_html)} {text}" if label else text)
        return "\n".join(lines)

    def _trade_rows(self, message: NotificationMessage) -> list[tuple[str, Any]]:
        payload: dict[str, Any] = message.payload or {}
        raw = payload.get("trade")
        trade = cast(dict[str, Any], raw) if isinstance(raw, dict) else {}
        return [
            ("Wallet", payload.get("wallet")),
            ("Market", trade.get("title")),
            ("Event", trade.get("eventSlug")),
            ("Side", trade.get("side")),
            ("Outcome", trade.get("outcome")),
            ("Size", self._format_number(trade.get("size"))),
            ("Price", self._format_number(trade.get("price"))),
            ("Time", self._format_timestamp(trade.get("timestamp"))),
            ("Tx", trade.get("transactionHash")),
        ]

    @staticmethod
    def _bold(text: str, parse_html: bool) -> str:
        return f"<b>{html.escape(text)}</b>" if parse_html else text

    @staticmethod
    def _escape(text: str, parse_html: bool) -> str:
        return html.escape(text) if parse_html else text

    @staticmethod
    def _format_number(value: Any) -> str | None:
        if value is None:
            return None
        try:
            return f"{float(value):,.4f}"
        except (TypeError, ValueError):
            return str(value)

    @staticmethod
    def _format_timestamp(value: Any) -> str | None:
        """Epoch seconds as ISO-8601 UTC."""
        if value is None:
            return None
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc).isoformat()
        except (TypeError, ValueError, OSError, OverflowError):
            return str(value)
