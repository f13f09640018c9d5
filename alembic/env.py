import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from alumni.core.config import settings
from alumni.db.base import Base
from alumni.db.models import ecard_model, resource_models, user_model  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

target_metadata = Base.metadata


def migration_url() -> str:
    """Sync psycopg2 URL for the same database the app reaches through asyncpg."""
    return settings.database_url.replace("+asyncpg", "+psycopg2")


def configure_options() -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "compare_server_default": True,
    }


def run_migrations_offline():
    """Emit the SQL script for `alembic upgrade --sql` without connecting."""
    context.configure(
        url=migration_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **configure_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    engine = create_engine(migration_url(), poolclass=pool.NullPool)
    logger.info("Migrating %s on %s:%s", settings.DB_NAME, settings.DB_HOST, settings.DB_PORT)
    with engine.connect() as connection:
        context.configure(connection=connection, **configure_options())
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
