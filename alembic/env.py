"""Alembic environment for the campus events schema.

Migrations run on an async engine built from ``settings.database_url``.
After an online ``alembic upgrade`` the demo seeders run as well; pass
``-x seed=false`` to skip them.
"""

import asyncio
import os
import sys
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_engine_from_config,
    async_sessionmaker,
)

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
    """Emit migration SQL to stdout without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def _apply(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def _seeding_enabled() -> bool:
    """Seed after ``upgrade`` unless disabled with ``-x seed=false``."""
    flag = context.get_x_argument(as_dictionary=True).get("seed", "true")
    if flag.strip().lower() in {"0", "false", "no", "n"}:
        return False
    cmd = getattr(getattr(config, "cmd_opts", None), "cmd", None)
    command = cmd[0] if isinstance(cmd, tuple) else cmd
    return getattr(command, "__name__", None) == "upgrade"


async def _seed(engine: AsyncEngine) -> None:
    # seeds/ lives next to this file rather than inside src/
    alembic_dir = os.path.dirname(__file__)
    if alembic_dir not in sys.path:
        sys.path.insert(0, alembic_dir)

    from seeds import run_all_seeders

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await run_all_seeders(session)
        await session.commit()


async def run_async_migrations() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with engine.connect() as connection:
        await connection.run_sync(_apply)

    if _seeding_enabled():
        await _seed(engine)

    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
