"""SQLAlchemy models for the durable trade store."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class UserActivityModel(Base):
    """Recorded TRADE activity of a tracked account (one row per trade)."""

    __tablename__ = "user_activities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account: Mapped[str] = mapped_column(String(255), nullable=False)

    transaction_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False)
    condition_id: Mapped[str] = mapped_column(String(255), nullable=False)

    type: Mapped[str] = mapped_column(String(64), nullable=False, default="TRADE")
    side: Mapped[str | None] = mapped_column(String(32), nullable=True)
    size: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    usdc_size: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    asset: Mapped[str | None] = mapped_column(String(255), nullable=True)
    outcome: Mapped[str | None] = mapped_column(Text, nullable=True)
    outcome_index: Mapped[int | None] = mapped_column(Integer, nullable=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(Text, nullable=True)
    event_slug: Mapped[str] = mapped_column(Text, nullable=False, default="")
    proxy_wallet: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    pseudonym: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    profile_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_image_optimized: Mapped[str] = mapped_column(Text, nullable=False, default="")

    actioned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    action_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    __table_args__ = (
        UniqueConstraint(
            "account",
            "transaction_hash",
            "timestamp",
            "condition_id",
            name="uq_user_activities_account_trade",
        ),
        Index("idx_user_activities_account", "account"),
    )
