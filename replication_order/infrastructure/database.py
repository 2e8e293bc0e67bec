"""Database Manager — engine ownership, schema setup, sessions with automatic rollback.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - An in-memory database lives exactly as long as its Database object
    - open_database() applies the logging settings before the engine starts

Design Decisions:
    - No module-level singleton: callers acquire a Database with open_database()
      and pass it (or its sessions) explicitly
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession

import replication_order.models  # noqa: F401
from replication_order.config import Settings
from replication_order.core.errors import DatabaseError
from replication_order.db.base import Base
from replication_order.db.session import create_engine_for, create_session_factory
from replication_order.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


# Most specific first: IntegrityError and OperationalError are DBAPIErrors.
_FAILURES = (
    (IntegrityError, "Duplicate or dangling article/tag key", "store"),
    (OperationalError, "SQLite database unavailable or schema missing", "connect"),
    (DBAPIError, "Driver rejected the statement", "query"),
)


def _describe_failure(error: SQLAlchemyError) -> tuple[str, str]:
    for error_type, message, operation in _FAILURES:
        if isinstance(error, error_type):
            return message, operation
    return "ORM session error", "session"


class Database:
    """Owns one async engine and hands out sessions with rollback and error mapping."""

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_engine_for(database_url, echo=echo)
        self._session_factory = create_session_factory(self.engine)

    async def create_schema(self) -> None:
        """Create all tables registered on Base."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"Schema creation failed: {e}")
            raise DatabaseError("Could not create schema", "create_schema") from e

    async def drop_schema(self) -> None:
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.drop_all)
        except SQLAlchemyError as e:
            logger.error(f"Schema drop failed: {e}")
            raise DatabaseError("Could not drop schema", "drop_schema") from e

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback; failures surface as DatabaseError."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            message, operation = _describe_failure(e)
            logger.error(
                f"Session rolled back after {operation} failure: {e}",
                extra={"error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(message, operation) from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except DatabaseError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


@asynccontextmanager
async def open_database(settings: Settings) -> AsyncGenerator[Database, None]:
    """Configure logging, open a database with its schema created; dispose on exit."""
    setup_logging(settings.log_level, settings.log_format)
    database = Database(settings.database_url, echo=settings.echo_sql)
    try:
        await database.create_schema()
        logger.info("Database ready")
        yield database
    finally:
        await database.dispose()
        logger.info("Database disposed")
