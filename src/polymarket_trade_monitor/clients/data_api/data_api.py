# -*- coding: utf-8 -*-
"""Polymarket Data API client (public endpoints)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, cast
from structlog.contextvars import bound_contextvars

from polymarket_trade_monitor.clients.data_api.schema import ActivitySchema, ActivityType
from polymarket_trade_monitor.config import Settings
from polymarket_trade_monitor.utils.validation import mask_address

if TYPE_CHECKING:
    from polymarket_trade_monitor.clients.http import AsyncHttpClient


class DataApiClient:
    """Client for the Polymarket Data API (GET /activity)."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses settings.api).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.api.data_api_host.rstrip("/")

    async def get_activity(
        self,
        user: str,
        *,
        activity_type: ActivityType = "TRADE",
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[ActivitySchema]:
        """Fetch on-chain activity for a user (most recent first).

        API: GET /activity?user=...&type=...

        Args:
            user: Wallet address (0x...).
            activity_type: Activity type filter (default TRADE).
            limit: Number of items; default from settings.api.activity_limit.
            offset: Pagination offset.

        Returns:
            List of activity items (Activity schema). Empty if the body is not a list.

        Raises:
            PolymarketAPIError: If the request fails after all retries.
        """
        limit = limit if limit is not None else self._settings.api.activity_limit
        with bound_contextvars(
            data_api_user_masked=mask_address(user),
            data_api_activity_type=activity_type,
            data_api_limit=limit,
        ):
            url = f"{self._base_url()}/activity"
            params: Dict[str, Any] = {
                "user": user,
                "type": activity_type,
                "limit": limit,
                "offset": offset,
            }
            data = await self._http.get(url, params=params)
            if not isinstance(data, list):
                self._logger.warning(
                    "data_api_get_activity_non_list",
                    data_api_response_type=type(data).__name__,
                )
                return []
            return [cast(ActivitySchema, x) for x in cast(list[Any], data) if isinstance(x, dict)]
