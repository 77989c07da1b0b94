# src/cms_backend/utils/database.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import DateTime, TypeDecorator

from cms_backend.config import settings
from cms_backend.utils.exceptions import Internal
from cms_backend.utils.timezone import LOCAL_TZ

logger = logging.getLogger(__name__)

# Base class for SQLAlchemy ORM models (for declarative base models)
Base = declarative_base()


class TZDateTime(TypeDecorator):
    """
    Timezone-aware DateTime on every backend.

    SQLite stores no offset: values are written as local wall time and the
    configured zone is attached again when they are read back.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(LOCAL_TZ)
            if dialect.name == "sqlite":
                value = value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = LOCAL_TZ.localize(value)
        return value


def _is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def _is_sqlite_memory(url: str) -> bool:
    database = make_url(url).database
    return _is_sqlite(url) and database in (None, "", ":memory:")


def _ensure_sqlite_dir(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    if not _is_sqlite(url) or _is_sqlite_memory(url):
        return
    Path(make_url(url).database).parent.mkdir(parents=True, exist_ok=True)


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """
    Create the async engine owned by one application instance.

    SQLite ignores the pool tuning knobs; an in-memory SQLite database is
    pinned to a single connection so every session sees the same data.
    """
    url = database_url or settings.DATABASE_URL
    echo = settings.DB_ECHO if echo is None else echo

    try:
        if _is_sqlite_memory(url):
            engine = create_async_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        elif _is_sqlite(url):
            _ensure_sqlite_dir(url)
            engine = create_async_engine(
                url,
                echo=echo,
                connect_args={"timeout": settings.DB_TIMEOUT},
            )
        else:
            engine = create_async_engine(
                url,
                echo=echo,  # Logs all SQL queries if True
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                connect_args={"timeout": settings.DB_TIMEOUT},
                pool_pre_ping=True,  # Ensures the connections are valid before using them
            )
    except SQLAlchemyError as e:
        logger.error("Error creating database engine: %s", e)
        raise

    logger.info("Database engine ready: %s", make_url(url).render_as_string(hide_password=True))
    return engine


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,  # To avoid flushing automatically
        expire_on_commit=False,  # Don't expire objects after commit
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create every mapped table that does not exist yet."""
    # model modules register themselves on Base.metadata when imported
    import cms_backend.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured (%d tables)", len(Base.metadata.tables))


# Dependency to retrieve a database session in FastAPI
# Ensures the session is properly closed after use
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.sessionmaker
    async with session_factory() as session:
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error("Error: while interacting with the database: %s", e)
            await session.rollback()
            raise Internal("database operation failed") from e
