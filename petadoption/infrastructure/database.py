"""Database Session Manager — async SQLite engine with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py),
      keeping the driver's own message
    - The manager lives on app.state; handlers reach it only through get_db

Design Decisions:
    - Manager created in the FastAPI lifespan and read from app.state per
      request instead of a module-level handle; tests place their own manager there
    - expire_on_commit=False: prevents lazy-load issues in async context
    - In-memory SQLite uses StaticPool so every session sees the same database
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from petadoption import models  # noqa: F401  (populates Base.metadata)
from petadoption.core.errors import DatabaseError
from petadoption.db.base import Base

logger = logging.getLogger(__name__)


def raw_error_message(e: SQLAlchemyError) -> str:
    """Driver-level message without SQLAlchemy's statement/params suffix."""
    orig = getattr(e, "orig", None)
    return str(orig) if orig is not None else str(e)


def _operation_for(e: SQLAlchemyError) -> str:
    if isinstance(e, IntegrityError):
        return "commit"
    if isinstance(e, OperationalError):
        return "execute"
    if isinstance(e, DBAPIError):
        return "query"
    return "unknown"


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite") and (
        ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite+aiosqlite:")
    )


class DatabaseSessionManager:
    """Manages async database sessions with rollback, schema creation, and health checks."""

    def __init__(self, database_url: str, echo: bool = False):
        engine_options: dict = {"echo": echo}
        if _is_memory_sqlite(database_url):
            engine_options["poolclass"] = StaticPool
            engine_options["connect_args"] = {"check_same_thread": False}
        else:
            engine_options["pool_pre_ping"] = True
        self.engine = create_async_engine(database_url, **engine_options)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; roll back and raise DatabaseError on store failure."""
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            await db.rollback()
            operation = _operation_for(e)
            logger.error(f"Store error during {operation}: {e}")
            raise DatabaseError(raw_error_message(e), operation) from e
        finally:
            await db.close()

    async def create_schema(self) -> None:
        """Create any missing tables (CREATE TABLE IF NOT EXISTS semantics)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """True when a trivial query succeeds; used by /health/ready."""
        try:
            async with self.session() as db:
                await db.scalar(text("SELECT 1"))
        except DatabaseError as e:
            logger.warning(f"Health check failed: {e.message}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Per-request session from the manager stored on app.state."""
    manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if manager is None:
        raise RuntimeError("DatabaseSessionManager missing from app.state")
    async with manager.session() as db:
        yield db
