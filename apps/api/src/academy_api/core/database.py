"""
Database Configuration

Async SQLAlchemy engine, session factory and the declarative Base shared by
every module's models.
"""

import logging
from collections.abc import AsyncGenerator
from datetime import datetime

from sqlalchemy import DateTime, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from academy_api.core.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    type_annotation_map = {
        datetime: DateTime(timezone=True),
    }


engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

# expire_on_commit=False so ORM objects stay readable after commit
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that yields a database session.

    The session is closed when the request finishes.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Verify database connectivity.

    Call this on application startup. Schema changes are applied with Alembic.
    """
    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection verified")


async def close_db() -> None:
    """Dispose of the engine's connection pool."""
    await engine.dispose()
