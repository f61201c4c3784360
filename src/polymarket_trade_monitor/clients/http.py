# -*- coding: utf-8 -*-
"""Async HTTP client with retries and rate-limit handling."""

from __future__ import annotations

import asyncio
import random
import uuid
import aiohttp
import structlog
from typing import Any, Awaitable, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from polymarket_trade_monitor.config import Settings
from polymarket_trade_monitor.exceptions import PolymarketAPIError, RateLimitError


def _retry_after_seconds(response: aiohttp.ClientResponse) -> Optional[float]:
    header = response.headers.get("Retry-After")
    if not header:
        return None
    try:
        value = float(header)
    except ValueError:
        return None
    return value if value > 0 else None


class AsyncHttpClient:
    """Async HTTP client for Polymarket APIs with retries and 429 handling.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created lazily and must be closed via aclose() or by
    using the client as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (settings.api.timeout_seconds, max_retries).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            sleep: Coroutine used between attempts (injected for tests).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._sleep = sleep
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.api.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _backoff_delay(self, attempt: int) -> float:
        """Exponential backoff with jitter, capped at 4 seconds."""
        base = min(4.0, 0.25 * (2**attempt))
        return base + random.uniform(0.0, 0.15)

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a GET request and return JSON. Retries on failure and on 429.

        Args:
            url: Full URL to request.
            params: Optional query parameters (str, int or float values).

        Returns:
            Parsed JSON response (dict or list).

        Raises:
            RateLimitError: If every attempt was answered with 429.
            PolymarketAPIError: If the request fails after all retries.
        """
        params = params or {}
        max_retries = self._settings.api.max_retries
        last_error: Optional[Exception] = None
        last_retry_after: Optional[float] = None
        rate_limited = 0

        with bound_contextvars(
            http_url=url,
            http_request_id=uuid.uuid4().hex[:12],
            http_max_retries=max_retries,
        ):
            for attempt in range(max_retries):
                with bound_contextvars(http_attempt=attempt + 1):
                    try:
                        session = await self._get_session()
                        async with session.get(url, params=params) as response:
                            if response.status == 429:
                                rate_limited += 1
                                last_retry_after = _retry_after_seconds(response)
                                self._logger.warning(
                                    "http_get_rate_limited",
                                    http_status_code=429,
                                    http_retry_after_seconds=last_retry_after,
                                )
                                delay = last_retry_after or self._backoff_delay(attempt)
                            else:
                                response.raise_for_status()
                                return await response.json()
                    except aiohttp.ClientResponseError as e:
                        last_error = e
                        self._logger.debug(
                            "http_get_retry",
                            error_type=type(e).__name__,
                            error_message=str(e),
                            http_status_code=e.status,
                        )
                        delay = self._backoff_delay(attempt)
                    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                        # ValueError covers aiohttp's ContentTypeError/JSON decode failures
                        last_error = e
                        self._logger.debug(
                            "http_get_retry",
                            error_type=type(e).__name__,
                            error_message=str(e),
                        )
                        delay = self._backoff_delay(attempt)
                    if attempt < max_retries - 1:
                        await self._sleep(delay)

            if rate_limited == max_retries:
                self._logger.error("http_get_rate_limit_exhausted", http_attempts=max_retries)
                raise RateLimitError(url=url, retry_after=last_retry_after)

            status_code = (
                last_error.status if isinstance(last_error, aiohttp.ClientResponseError) else None
            )
            self._logger.error(
                "http_get_failed",
                http_status_code=status_code,
                http_attempts=max_retries,
                error_type=type(last_error).__name__ if last_error else None,
                error_message=str(last_error) if last_error else None,
            )
            raise PolymarketAPIError(
                f"GET failed after {max_retries} retries: {url}",
                url=url,
                status_code=status_code,
                cause=last_error,
            ) from last_error
