"""Database engine and async session management for the trade store."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from polymarket_trade_monitor.config import Settings
from polymarket_trade_monitor.persistence.repositories.sql.models import Base

_ASYNC_DRIVERS = {
    "sqlite://": "sqlite+aiosqlite://",
    "postgresql://": "postgresql+asyncpg://",
}


def normalize_async_database_url(database_url: str) -> str:
    """Swap a sync dialect prefix for its async driver (sqlite -> aiosqlite, postgresql -> asyncpg)."""
    for sync_prefix, async_prefix in _ASYNC_DRIVERS.items():
        if database_url.startswith(sync_prefix):
            return database_url.replace(sync_prefix, async_prefix, 1)
    return database_url


class DatabaseManager:
    """Owns the async engine and session factory."""

    def __init__(
        self,
        settings: Settings,
        *,
        engine: AsyncEngine | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            settings: Application settings (uses settings.database).
            engine: Optional pre-built engine (tests); otherwise created lazily from settings.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._engine = engine
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _get_engine(self) -> AsyncEngine:
        if self._engine is None:
            cfg = self._settings.database
            url = normalize_async_database_url(cfg.url)
            kwargs: dict[str, Any] = {"echo": cfg.echo}
            # SQLite uses a static/null pool; pool sizing only applies to server databases.
            if not url.startswith("sqlite"):
                kwargs.update(pool_size=cfg.pool_size, max_overflow=cfg.max_overflow)
            self._engine = create_async_engine(url, **kwargs)
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; commit on success, roll back on error."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(bind=self._get_engine(), expire_on_commit=False)
        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def init_schema_async(self) -> None:
        """Create missing tables."""
        async with self._get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self._logger.info("database_schema_initialized")

    async def dispose_async(self) -> None:
        """Dispose of all pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
        self._logger.debug("database_disposed")
