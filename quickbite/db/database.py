"""Database engine, unit-of-work sessions and initialization."""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from quickbite.core.config import settings
from quickbite.models.menu_item import Base, TimestampMixin

logger = logging.getLogger(__name__)

_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    parsed = make_url(url)
    if not parsed.drivername.startswith("sqlite") or not parsed.database:
        return
    if parsed.database == ":memory:":
        return
    db_dir = os.path.dirname(parsed.database)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
        logger.info("Database directory ensured at %s", db_dir)


def get_engine() -> AsyncEngine:
    """Return the process-wide async engine, creating it on first use."""
    global _engine, _sessionmaker
    if _engine is None:
        _ensure_sqlite_directory(settings.DATABASE_URL)
        logger.info("Creating database engine for %s", settings.DATABASE_URL)
        _engine = create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
        _sessionmaker = async_sessionmaker(
            _engine, expire_on_commit=False, autoflush=False, class_=AsyncSession
        )
    return _engine


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine so settings are re-read."""
    global _engine, _sessionmaker
    if _engine is not None:
        logger.info("Disposing database engine")
        await _engine.dispose()
    _engine = None
    _sessionmaker = None


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a fresh session (one unit of work) and roll back on failure."""
    if _sessionmaker is None:
        get_engine()
    assert _sessionmaker is not None
    session = _sessionmaker()
    logger.trace("Database session opened")
    try:
        yield session
    except Exception as exc:
        # Also reached by HTTP errors raised while the request owns the session.
        logger.warning("Database transaction rolled back after %s", type(exc).__name__)
        await session.rollback()
        raise
    finally:
        await session.close()
        logger.trace("Database session closed")


def stamp_timestamps(session: AsyncSession, now: Optional[datetime] = None) -> int:
    """
    Stamp audit timestamps on every pending entity in the unit of work.

    Newly added entities get both ``created_at`` and ``updated_at``; modified
    entities only get ``updated_at``. Returns the number of entities stamped.
    """
    now = now or datetime.now(tz=timezone.utc)
    stamped = 0
    for entity in session.new:
        if isinstance(entity, TimestampMixin):
            entity.created_at = now
            entity.updated_at = now
            stamped += 1
    for entity in session.dirty:
        if isinstance(entity, TimestampMixin):
            entity.updated_at = now
            stamped += 1
    logger.trace("Stamped timestamps on %s pending entities", stamped)
    return stamped


async def save_changes(session: AsyncSession) -> None:
    """Stamp pending entities and commit the unit of work."""
    stamp_timestamps(session)
    await session.commit()
    logger.trace("Database transaction committed")


async def init_db() -> None:
    """Initialize the database by creating all tables (idempotent)."""
    logger.info("Initializing database schema")
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
