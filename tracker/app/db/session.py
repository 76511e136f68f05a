"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support (SQLite by default, PostgreSQL via asyncpg).
"""

from typing import Any, Dict

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from tracker.app.core.config import settings


def engine_options(url: str, echo: bool = False, pool_size: int = 5, max_overflow: int = 10) -> Dict[str, Any]:
    """
    Build keyword arguments for create_async_engine.

    SQLite pools do not take sizing arguments, so those are only passed
    for server databases.
    """
    options: Dict[str, Any] = {"echo": echo, "future": True}
    if make_url(url).get_backend_name() != "sqlite":
        options["pool_size"] = pool_size
        options["max_overflow"] = max_overflow
    return options


# Create async engine
engine = create_async_engine(
    settings.database_url,
    **engine_options(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    ),
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()


async def init_db(bind: AsyncEngine = engine) -> None:
    """Create the parcel table if it does not exist yet."""
    # Import models so they are registered with Base
    from tracker.app.models.parcel import Parcel  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

