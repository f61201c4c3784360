# -*- coding: utf-8 -*-
"""SQLAlchemy user activity repository (one table, rows scoped by account)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from polymarket_trade_monitor.exceptions import DuplicateActivityError, PersistenceError
from polymarket_trade_monitor.models.user_activity import UserActivity
from polymarket_trade_monitor.persistence.repositories.interfaces.user_activity_repository import (
    IUserActivityRepository,
)
from polymarket_trade_monitor.persistence.repositories.sql.database import DatabaseManager
from polymarket_trade_monitor.persistence.repositories.sql.models import UserActivityModel

_COLUMNS = (
    "transaction_hash",
    "timestamp",
    "condition_id",
    "type",
    "side",
    "size",
    "usdc_size",
    "price",
    "asset",
    "outcome",
    "outcome_index",
    "title",
    "slug",
    "icon",
    "event_slug",
    "proxy_wallet",
    "name",
    "pseudonym",
    "bio",
    "profile_image",
    "profile_image_optimized",
    "actioned",
    "action_count",
)


def _to_model(account: str, activity: UserActivity) -> UserActivityModel:
    values = {c: getattr(activity, c) for c in _COLUMNS}
    # NOT NULL text columns; enriched activities already carry "" here
    for c in ("event_slug", "bio", "profile_image_optimized"):
        if values[c] is None:
            values[c] = ""
    return UserActivityModel(account=account, **values)


def _from_model(model: UserActivityModel) -> UserActivity:
    return UserActivity(**{c: getattr(model, c) for c in _COLUMNS})


class SqlUserActivityRepository(IUserActivityRepository):
    """IUserActivityRepository backed by SQLAlchemy (each insert in its own transaction)."""

    def __init__(self, database: DatabaseManager) -> None:
        self._db = database

    async def find_all(self, account: str) -> list[UserActivity]:
        stmt = select(UserActivityModel).where(UserActivityModel.account == account.strip())
        try:
            async with self._db.session() as session:
                result = await session.execute(stmt)
                return [_from_model(m) for m in result.scalars().all()]
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to load activities: {e}", cause=e) from e

    async def insert(self, account: str, activity: UserActivity) -> None:
        try:
            async with self._db.session() as session:
                session.add(_to_model(account.strip(), activity))
                await session.flush()
        except IntegrityError as e:
            raise DuplicateActivityError(
                f"activity already stored: {activity.transaction_hash}", cause=e
            ) from e
        except SQLAlchemyError as e:
            raise PersistenceError(f"failed to store activity: {e}", cause=e) from e
