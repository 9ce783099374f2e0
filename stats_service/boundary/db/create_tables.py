"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, stats_service.configs
System role: Database schema initialization

Usage:
    python -m stats_service.boundary.db.create_tables
"""

import asyncio
import logging

from stats_service.boundary.db.base import Base
from stats_service.boundary.db.connection import dispose_async_engine, get_async_engine
from stats_service.configs import get_settings
from stats_service.observability.logger import configure_logging

# Import all models to register them with Base.metadata
from stats_service.boundary.db import models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("All tables dropped")


async def main() -> None:
    configure_logging(get_settings().log_level)
    try:
        await create_all_tables()
    finally:
        await dispose_async_engine()


if __name__ == "__main__":
    asyncio.run(main())
