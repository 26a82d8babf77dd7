"""Alembic environment for the Question Bank schema.

``alembic.ini`` puts ``src/`` on the path. The URL comes from ALEMBIC_URL
when set, otherwise from the application settings.
"""
from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context

from question_bank.core.settings import settings
from question_bank.db.session import Base, build_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    return os.getenv("ALEMBIC_URL") or settings.effective_database_url


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting."""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations through an engine built like the application's."""
    engine = build_engine(_database_url())

    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                render_as_batch=connection.dialect.name == "sqlite",
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
