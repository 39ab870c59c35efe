"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Database wraps one engine and its session factory. The app lifespan builds
it from settings and stores it on app.state.database; request handlers
receive sessions through the get_db dependency, so tests can point the app
at a throwaway database without touching module globals.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from taskhub.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _engine_options(settings: Settings) -> dict[str, Any]:
    """Pool and driver options; pool sizing applies to PostgreSQL only."""
    options: dict[str, Any] = {"echo": settings.database_echo}
    if "postgresql" not in settings.database_url:
        return options
    command_timeout = (
        settings.db_command_timeout if settings.db_command_timeout is not None else 60
    )
    options.update(
        pool_pre_ping=True,
        pool_size=settings.db_pool_size if settings.db_pool_size is not None else 10,
        max_overflow=settings.db_max_overflow if settings.db_max_overflow is not None else 20,
        pool_recycle=3600,
        connect_args={"command_timeout": command_timeout},
    )
    return options


class Database:
    """Engine plus session factory for a single database URL."""

    def __init__(self, settings: Settings) -> None:
        self.engine: AsyncEngine = create_async_engine(
            settings.database_url, **_engine_options(settings)
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create missing tables from ORM metadata (local and test runs)."""
        # Register models on Base.metadata before create_all.
        from taskhub.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session and close it on exit. Callers commit explicitly."""
        async with self.session_factory() as session:
            yield session

    async def ping(self) -> bool:
        """Return True if the database answers SELECT 1."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            logger.warning("Database ping failed", exc_info=True)
            return False
        return True

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
