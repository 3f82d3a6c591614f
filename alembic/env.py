"""Alembic environment configuration for the awards catalog."""
import asyncio
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel

# Load local .env file before app settings are read.
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path, override=False)

from app.config import settings  # noqa: E402
from app.schemas import movies  # noqa: E402,F401
from app.utils.db_async import is_memory_sqlite_url, prepare_connection  # noqa: E402

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

if is_memory_sqlite_url(settings.database_url):
    raise RuntimeError("DATABASE_URL must point at a persistent database for Alembic migrations")

DB_URL, ENGINE_KWARGS = prepare_connection(settings.database_url)
connect_args = ENGINE_KWARGS.get("connect_args", {})

config.set_main_option("sqlalchemy.url", DB_URL)

target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=DB_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable: AsyncEngine = create_async_engine(
        DB_URL,
        poolclass=pool.NullPool,
        connect_args=connect_args,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
