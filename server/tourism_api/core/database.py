"""Database configuration and async session management."""

from datetime import datetime, timezone
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from .config import settings


def utcnow() -> datetime:
    """Timezone-aware current time used for creation timestamps."""
    return datetime.now(timezone.utc)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _build_engine(database_url: str) -> AsyncEngine:
    is_sqlite = database_url.startswith("sqlite")
    engine_kwargs = {
        "echo": False,
        "pool_pre_ping": not is_sqlite,
    }
    if is_sqlite:
        engine_kwargs["poolclass"] = StaticPool
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    new_engine = create_async_engine(database_url, **engine_kwargs)
    if is_sqlite:
        enable_sqlite_foreign_keys(new_engine)
    return new_engine


# Create async engine
engine = _build_engine(settings.database_url)

# Create async session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function that yields database sessions.

    Yields:
        AsyncSession: Database session
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


# Alias for FastAPI dependency injection
get_db = get_async_session


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database connections."""
    await engine.dispose()
