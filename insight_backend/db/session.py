"""Async engine, session factory and dev-mode schema bootstrap."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .models import Base

logger = logging.getLogger(__name__)


def make_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the content store.

    Postgres (asyncpg) gets a sized pool; SQLite (aiosqlite) only needs
    ``check_same_thread`` disabled since the driver hops threads.
    """
    kwargs: dict = {"echo": echo, "pool_pre_ping": True}
    connect_args: dict = {}

    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    elif database_url.startswith("postgresql"):
        kwargs["pool_size"] = 10
        kwargs["max_overflow"] = 20

    return create_async_engine(database_url, connect_args=connect_args, **kwargs)


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create all content tables in place (dev mode only, no alembic)."""
    async with engine.begin() as conn:
        if engine.dialect.name == "sqlite":
            await conn.execute(text("PRAGMA foreign_keys=ON"))
        await conn.run_sync(Base.metadata.create_all)
    logger.info("content schema created (dialect=%s)", engine.dialect.name)
