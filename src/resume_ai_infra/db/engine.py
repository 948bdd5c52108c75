"""Async database engine factory."""

from __future__ import annotations

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from resume_ai_core.config.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for ``settings.database_url``.

    In-memory SQLite databases get a single shared connection so every
    session sees the same tables. Postgres uses a small pre-pinged pool.
    """
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            return create_async_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_async_engine(url, connect_args={"check_same_thread": False})
    return create_async_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )
