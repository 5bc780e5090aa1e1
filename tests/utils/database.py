"""Database utilities for testing.

This module provides helper functions for managing the throwaway SQLite
databases the test suite runs against.
"""

from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.db.postgres.session import Base

# Import all models to ensure they are registered with Base.metadata
# This allows Base.metadata.create_all() and Base.metadata.drop_all() to work properly
from app.features.mindmap import models  # noqa: F401


def sqlite_url(db_path: Path) -> str:
    """Build an aiosqlite URL for a database file.

    Args:
        db_path: Location of the SQLite file
    """
    return f"sqlite+aiosqlite:///{db_path}"


def create_test_engine(db_path: Path) -> AsyncEngine:
    """Create an async engine bound to a SQLite file.

    Args:
        db_path: Location of the SQLite file
    """
    return create_async_engine(sqlite_url(db_path), echo=False)


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create all tables from SQLAlchemy metadata.

    Args:
        engine: SQLAlchemy async engine
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine) -> None:
    """Drop all tables from SQLAlchemy metadata.

    Args:
        engine: SQLAlchemy async engine
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
