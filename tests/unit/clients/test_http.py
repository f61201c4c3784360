# -*- coding: utf-8 -*-
"""Unit tests for AsyncHttpClient retries and 429 handling."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, cast
from unittest.mock import AsyncMock

import aiohttp
import pytest

from polymarket_trade_monitor.clients.http import AsyncHttpClient
from polymarket_trade_monitor.config import Settings
from polymarket_trade_monitor.exceptions import PolymarketAPIError, RateLimitError

URL = "https://data-api.test/activity"


class _FakeResponse:
    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status = status
        self.headers = headers or {}
        self._body = body

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                cast(Any, SimpleNamespace(real_url=URL)),
                (),
                status=self.status,
                message="error",
            )

    async def json(self) -> Any:
        return self._body

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None


class _FakeSession:
    """Replays one queued response (or exception) per GET."""

    closed = False

    def __init__(self, *responses: _FakeResponse | Exception) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[str, dict[str, Any] | None]] = []

    def get(self, url: str, *, params: dict[str, Any] | None = None) -> _FakeResponse:
        self.calls.append((url, params))
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def close(self) -> None:
        raise AssertionError("injected session must not be closed by the client")


def _client(session: _FakeSession, sleep: AsyncMock, max_retries: int = 3) -> AsyncHttpClient:
    settings = Settings(api={"max_retries": max_retries})
    return AsyncHttpClient(settings, session=cast(Any, session), sleep=sleep)


async def test_get_returns_json_body() -> None:
    session = _FakeSession(_FakeResponse(body=[{"transactionHash": "0xa"}]))
    sleep = AsyncMock()

    body = await _client(session, sleep).get(URL, params={"user": "0x1"})

    assert body == [{"transactionHash": "0xa"}]
    assert session.calls == [(URL, {"user": "0x1"})]
    sleep.assert_not_awaited()


async def test_get_retries_after_server_error() -> None:
    session = _FakeSession(_FakeResponse(status=500), _FakeResponse(body=[]))
    sleep = AsyncMock()

    assert await _client(session, sleep).get(URL) == []
    assert len(session.calls) == 2
    sleep.assert_awaited_once()


async def test_get_waits_retry_after_seconds_on_429() -> None:
    session = _FakeSession(
        _FakeResponse(status=429, headers={"Retry-After": "2"}),
        _FakeResponse(body={"ok": True}),
    )
    sleep = AsyncMock()

    assert await _client(session, sleep).get(URL) == {"ok": True}
    sleep.assert_awaited_once_with(2.0)


async def test_get_raises_rate_limit_error_when_every_attempt_is_429() -> None:
    session = _FakeSession(
        *[_FakeResponse(status=429, headers={"Retry-After": "7"}) for _ in range(3)]
    )
    sleep = AsyncMock()

    with pytest.raises(RateLimitError) as exc_info:
        await _client(session, sleep, max_retries=3).get(URL)

    assert exc_info.value.status_code == 429
    assert exc_info.value.retry_after == 7.0
    assert len(session.calls) == 3
    assert [c.args[0] for c in sleep.await_args_list] == [7.0, 7.0]


async def test_get_raises_api_error_with_last_status_when_retries_run_out() -> None:
    session = _FakeSession(
        _FakeResponse(status=429),
        _FakeResponse(status=502),
        _FakeResponse(status=503),
    )
    sleep = AsyncMock()

    with pytest.raises(PolymarketAPIError) as exc_info:
        await _client(session, sleep, max_retries=3).get(URL)

    assert type(exc_info.value) is PolymarketAPIError
    assert exc_info.value.status_code == 503
    assert exc_info.value.url == URL
    assert isinstance(exc_info.value.cause, aiohttp.ClientResponseError)
    assert len(session.calls) == 3
    assert sleep.await_count == 2


async def test_get_raises_api_error_without_status_on_transport_failure() -> None:
    session = _FakeSession(
        aiohttp.ClientConnectionError("connection reset"),
        aiohttp.ClientConnectionError("connection reset"),
    )
    sleep = AsyncMock()

    with pytest.raises(PolymarketAPIError) as exc_info:
        await _client(session, sleep, max_retries=2).get(URL)

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.cause, aiohttp.ClientConnectionError)
    assert len(session.calls) == 2


async def test_aclose_leaves_injected_session_open() -> None:
    client = _client(_FakeSession(), AsyncMock())

    await client.aclose()
