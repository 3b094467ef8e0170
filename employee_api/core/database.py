"""Async SQLAlchemy engine and session lifecycle."""

from __future__ import annotations

import logging
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from employee_api.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    def __init__(self) -> None:
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.DATABASE_URL:
            logger.warning("DATABASE_URL missing — database not initialized")
            return

        # Table classes must be registered on Base.metadata before create_all
        from employee_api.repositories import employee_repository  # noqa: F401

        self.engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self.initialized = True
        logger.info("Database initialized (url=%s)", self.engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
        self.engine = None
        self.session_factory = None
        self.initialized = False

    async def session(self) -> AsyncIterator[AsyncSession]:
        if not self.session_factory:
            raise RuntimeError("Database not initialized")
        async with self.session_factory() as session:
            yield session

    async def check_connection(self) -> bool:
        if not self.engine:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.exception("Database connection check failed")
            return False


database = Database()
