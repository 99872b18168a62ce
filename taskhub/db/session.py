"""Database session configuration"""

import os
import logging
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker

from taskhub.config import get_database_url

logger = logging.getLogger(__name__)

# Connection pool configuration
POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))  # Default 5 connections
MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))  # Default 10 overflow
POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))  # Default 30 seconds
POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "3600"))  # Default 1 hour

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def to_async_url(database_url: str) -> str:
    """
    Convert a PostgreSQL URL to the async psycopg driver form.

    Raises:
        ValueError: If the URL is not a PostgreSQL URL
    """
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+psycopg://", 1)
    if database_url.startswith("postgresql+psycopg://"):
        return database_url
    if database_url.startswith("postgresql+asyncpg://"):
        # Legacy support: convert asyncpg URLs to psycopg
        return database_url.replace("postgresql+asyncpg://", "postgresql+psycopg://", 1)
    raise ValueError(f"Unsupported database URL format: {database_url}")


def get_engine() -> AsyncEngine:
    """Get or create the async engine singleton"""
    global _engine, _session_factory

    if _engine is None:
        _engine = create_async_engine(
            to_async_url(get_database_url()),
            pool_pre_ping=True,  # Verify connections before using them
            pool_size=POOL_SIZE,
            max_overflow=MAX_OVERFLOW,
            pool_timeout=POOL_TIMEOUT,
            pool_recycle=POOL_RECYCLE,
            echo=False,
        )
        _session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    return _engine


def reset_engine():
    """Forget the engine singleton (useful for testing)"""
    global _engine, _session_factory
    _engine = None
    _session_factory = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function for FastAPI routes.

    Usage:
        @router.get("/example")
        async def example(db: AsyncSession = Depends(get_db)):
            ...
    """
    get_engine()
    async with _session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
