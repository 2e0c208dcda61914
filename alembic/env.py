"""Alembic environment for the async engine.

The database URL comes from ``Settings``, not from alembic.ini. After an
online ``upgrade`` the idempotent seeders (roles, bootstrap administrator)
run in their own transaction; pass ``-x seed=false`` to skip them.
"""

import asyncio
import os
import sys
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_engine_from_config

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence import BaseModel

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)

# Registers every table on BaseModel.metadata for autogenerate
import src.infrastructure.persistence.models  # noqa: E402, F401

target_metadata = BaseModel.metadata


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting (``alembic upgrade --sql``)."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


def _should_run_seeders() -> bool:
    """Seed after ``upgrade`` unless ``-x seed=false`` is given."""
    flag = context.get_x_argument(as_dictionary=True).get("seed", "").lower()
    if flag in {"0", "false", "no"}:
        return False
    if flag in {"1", "true", "yes"}:
        return True

    cmd_opts = getattr(config, "cmd_opts", None)
    return getattr(cmd_opts, "cmd", None) is not None and (
        cmd_opts.cmd[0].__name__ == "upgrade"  # type: ignore[union-attr]
    )


async def _run_seeders(engine: AsyncEngine) -> None:
    # seeds/ lives next to this file and is not an installed package
    alembic_dir = os.path.dirname(__file__)
    if alembic_dir not in sys.path:
        sys.path.insert(0, alembic_dir)

    from seeds import run_all_seeders

    async with AsyncSession(engine, expire_on_commit=False) as session:
        await run_all_seeders(session)
        await session.commit()


async def run_async_migrations() -> None:
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    if _should_run_seeders():
        await _run_seeders(connectable)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
