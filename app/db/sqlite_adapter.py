"""
SQLite Database Adapter

This module implements the DatabaseAdapter interface for SQLite.

SQLite is a file-based database that's perfect for:
- Local development
- Testing
- Single-instance deployments
"""

from typing import Any

from sqlalchemy.pool import NullPool

from app.db.interface import DatabaseAdapter


class SQLiteAdapter(DatabaseAdapter):
    """
    SQLite database adapter implementation.

    - NullPool: file-based database, one connection per session
    - check_same_thread=False: required for aiosqlite
    """

    def get_pool_class(self) -> type[NullPool]:
        return NullPool

    def get_connect_args(self) -> dict[str, Any]:
        return {
            "check_same_thread": False
        }

    def get_engine_kwargs(self) -> dict[str, Any]:
        return {
            "echo": False  # Set to True only for SQL debugging in development
        }

    def get_dialect_name(self) -> str:
        return "sqlite"


def get_database_adapter() -> DatabaseAdapter:
    """
    Factory function to get the database adapter.

    Returns SQLiteAdapter by default. To switch to PostgreSQL, create a
    PostgreSQLAdapter class and update this function.
    """
    return SQLiteAdapter()
