"""Async database engine and session management (SQLAlchemy 2.0)."""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from infrastructure.config import get_settings, get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for ORM models."""


@lru_cache()
def get_engine() -> AsyncEngine:
    """
    Get the cached async engine.
    
    Returns:
        Engine bound to the configured database URL
    """
    settings = get_settings()
    engine_args = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
    }
    if not settings.database_url.startswith("sqlite"):
        engine_args.update({
            "pool_size": settings.database_pool_size,
            "max_overflow": settings.database_max_overflow,
        })
    return create_async_engine(settings.database_url, **engine_args)


@lru_cache()
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the cached session factory."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def session_scope(
    factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> AsyncIterator[AsyncSession]:
    """
    Open a session that commits on success and rolls back on error.
    
    One session is one unit of work: either every write of the
    operation persists or none does.
    
    Args:
        factory: Session factory, the configured one by default
    """
    async with (factory or get_session_factory())() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Initialize database (create tables)."""
    # Registers every model on Base.metadata
    from infrastructure.database import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def close_db() -> None:
    """Close database connections."""
    await get_engine().dispose()
