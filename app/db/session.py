"""
Database Session Management

This module creates the async engine through the database adapter and hands
out one session per request.

Key Features:
- Database abstraction: the adapter owns all dialect-specific configuration
- Async session management: commit on success, rollback on error
- init_db(): creates missing tables at startup (development convenience)
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from app.core.setting import settings
from app.db.sqlite_adapter import get_database_adapter

logger = logging.getLogger(__name__)

db_adapter = get_database_adapter()

engine = db_adapter.create_engine(
    settings.DATABASE_URL
)

async_session_maker = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,  # Records are serialized after the session commits
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function for FastAPI to get database session.

    Usage in FastAPI:
        @router.get("/endpoint")
        async def endpoint(session: AsyncSession = Depends(get_session)):
            ...
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create missing tables for every SQLModel table."""
    # Registers the tables on SQLModel.metadata
    from app.db import models  # noqa: F401

    logger.info(f"Creating missing tables ({db_adapter.get_dialect_name()})")
    await db_adapter.create_tables(engine)
