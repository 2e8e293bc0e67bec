"""Async Session Factory — provides async DB sessions outside the Database manager.

Invariants:
    - In-memory SQLite URLs get a StaticPool so every session sees the same database

Design Decisions:
    - Separate from infrastructure/database.py: test fixtures need a raw session factory
      bound to an engine they own
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool


def is_memory_url(database_url: str) -> bool:
    """True for SQLite URLs that point at a private in-memory database."""
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_engine_for(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; in-memory SQLite keeps one shared connection."""
    if is_memory_url(database_url):
        return create_async_engine(
            database_url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(database_url, echo=echo)


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
