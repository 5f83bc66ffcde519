"""Alembic environment: runs the books migrations on the app's async engine.

The database URL comes from bookstore.config, so DATABASE_URL and .env work
exactly as they do for the API (including the postgresql:// rewrite).
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from bookstore.config import get_settings
from bookstore.db.base import Base
import bookstore.models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=Base.metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations() -> None:
    engine = create_async_engine(
        get_settings().database_url, poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


asyncio.run(run_migrations())
