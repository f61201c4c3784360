# -*- coding: utf-8 -*-
"""Unit tests for SqlUserActivityRepository (SQLite in memory)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from polymarket_trade_monitor.config import Settings
from polymarket_trade_monitor.exceptions import DuplicateActivityError
from polymarket_trade_monitor.models.user_activity import UserActivity
from polymarket_trade_monitor.persistence.repositories.sql import (
    DatabaseManager,
    SqlUserActivityRepository,
    normalize_async_database_url,
)
from polymarket_trade_monitor.persistence.repositories.sql.models import UserActivityModel


@pytest.fixture
async def database(settings: Settings) -> AsyncIterator[DatabaseManager]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    manager = DatabaseManager(settings, engine=engine)
    await manager.init_schema_async()
    yield manager
    await manager.dispose_async()


@pytest.fixture
def sql_repo(database: DatabaseManager) -> SqlUserActivityRepository:
    return SqlUserActivityRepository(database)


def _record(tx: str = "0xa", ts: int = 1000, cid: str = "c1") -> UserActivity:
    return UserActivity(
        transaction_hash=tx,
        timestamp=ts,
        condition_id=cid,
        side="BUY",
        size=Decimal("10"),
        price=Decimal("0.25"),
        title="Market",
        profile_image="https://example.com/p.png",
    ).enriched()


async def test_insert_and_find_all_roundtrip(
    sql_repo: SqlUserActivityRepository,
    wallet: str,
) -> None:
    record = _record()

    await sql_repo.insert(wallet, record)
    loaded = await sql_repo.find_all(wallet)

    assert loaded == [record]
    assert loaded[0].profile_image_optimized == "https://example.com/p.png"
    assert loaded[0].actioned is False
    assert loaded[0].action_count == 0


async def test_find_all_is_scoped_by_account(
    sql_repo: SqlUserActivityRepository,
    wallet: str,
) -> None:
    await sql_repo.insert(wallet, _record("0xa"))
    await sql_repo.insert("0xother", _record("0xb"))

    assert [a.transaction_hash for a in await sql_repo.find_all(wallet)] == ["0xa"]


async def test_duplicate_key_raises_and_next_insert_still_works(
    sql_repo: SqlUserActivityRepository,
    wallet: str,
) -> None:
    await sql_repo.insert(wallet, _record("0xa"))

    with pytest.raises(DuplicateActivityError):
        await sql_repo.insert(wallet, _record("0xa"))
    await sql_repo.insert(wallet, _record("0xa", cid="c2"))

    assert len(await sql_repo.find_all(wallet)) == 2


async def test_unenriched_record_is_stored_with_empty_strings(
    sql_repo: SqlUserActivityRepository,
    wallet: str,
) -> None:
    await sql_repo.insert(wallet, UserActivity("0xraw", 1, "c1"))

    (loaded,) = await sql_repo.find_all(wallet)

    assert (loaded.event_slug, loaded.bio, loaded.profile_image_optimized) == ("", "", "")


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("sqlite:///trades.db", "sqlite+aiosqlite:///trades.db"),
        ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("sqlite+aiosqlite:///trades.db", "sqlite+aiosqlite:///trades.db"),
    ],
)
def test_normalize_async_database_url(url: str, expected: str) -> None:
    assert normalize_async_database_url(url) == expected


async def test_amounts_are_loaded_as_decimal(
    sql_repo: SqlUserActivityRepository,
    wallet: str,
) -> None:
    record = UserActivity(
        "0xa", 1000, "c1", size=Decimal("12.5"), usdc_size=Decimal("5.25"), price=Decimal("0.42")
    ).enriched()

    await sql_repo.insert(wallet, record)
    (loaded,) = await sql_repo.find_all(wallet)

    assert isinstance(loaded.price, Decimal)
    assert (loaded.size, loaded.usdc_size, loaded.price) == (
        Decimal("12.5"),
        Decimal("5.25"),
        Decimal("0.42"),
    )


async def test_non_standard_feed_values_are_stored(
    sql_repo: SqlUserActivityRepository,
    wallet: str,
) -> None:
    record = UserActivity(
        "0x" + "f" * 120,
        1000,
        "cond-" + "9" * 100,
        type="TRADE",
        outcome="A fairly long outcome label " * 8,
        proxy_wallet="proxy-" + "e" * 100,
    ).enriched()

    await sql_repo.insert(wallet, record)

    assert await sql_repo.find_all(wallet) == [record]


@pytest.mark.parametrize(
    ("column", "min_length"),
    [
        ("account", 255),
        ("transaction_hash", 255),
        ("condition_id", 255),
        ("proxy_wallet", 255),
        ("side", 32),
        ("type", 32),
    ],
)
def test_string_columns_leave_headroom(column: str, min_length: int) -> None:
    length = getattr(UserActivityModel.__table__.c[column].type, "length", None)

    assert length is None or length >= min_length
