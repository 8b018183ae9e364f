"""
Database Abstraction Interface

Defines the contract a database backend must satisfy so the rest of the
forum (session factory, migrations, tests) never branches on the dialect.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import Pool
from sqlmodel import SQLModel


class DatabaseAdapter(ABC):
    """
    Abstract base class for database adapters.

    To add a new database backend:
    1. Create a new class inheriting from DatabaseAdapter
    2. Implement the abstract methods
    3. Return it from get_database_adapter() for its URL scheme
    """

    @abstractmethod
    def get_pool_class(self) -> Optional[type[Pool]]:
        """Pool class for this backend, or None for SQLAlchemy's default."""

    @abstractmethod
    def get_connect_args(self) -> dict[str, Any]:
        """Driver-level connection arguments."""

    @abstractmethod
    def get_engine_kwargs(self) -> dict[str, Any]:
        """Extra create_async_engine() options."""

    @abstractmethod
    def get_dialect_name(self) -> str:
        """SQLAlchemy dialect name, e.g. 'sqlite'."""

    def create_engine(self, database_url: str, **kwargs) -> AsyncEngine:
        """
        Create the async engine for database_url.

        Args:
            database_url: Connection string
            **kwargs: Engine options, merged over get_engine_kwargs()
        """
        engine_kwargs = self.get_engine_kwargs()
        engine_kwargs.update(kwargs)

        pool_class = self.get_pool_class()
        if pool_class is not None:
            engine_kwargs.setdefault("poolclass", pool_class)

        return create_async_engine(
            database_url,
            connect_args=self.get_connect_args(),
            **engine_kwargs
        )

    async def create_tables(self, engine: AsyncEngine) -> None:
        """Create every table registered on SQLModel.metadata that does not exist yet."""
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
