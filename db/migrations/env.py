"""Alembic environment for the car rental schema.

Uses the same DATABASE_URL validation as the application, so migrations
run against asyncpg (PostgreSQL) or aiosqlite (SQLite) only.
"""
import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine

from db.connection import resolve_url
from db.models import Base

config = context.config

# alembic.ini logging, skipped when the Config is built in code
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

url = resolve_url(config.get_main_option("sqlalchemy.url") or None)

# SQLite cannot ALTER most constraints in place.
render_as_batch = url.get_backend_name() == "sqlite"


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=url.render_as_string(hide_password=False),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=render_as_batch,
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=render_as_batch,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    connectable = create_async_engine(url)
    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
