"""Database engine and session configuration."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from question_bank.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import question_bank.models  # noqa: E402,F401


WRITE_LOCK_OPTION = "question_bank_write_lock"


def _install_sqlite_hooks(engine: Engine) -> None:
    """Take transaction control away from pysqlite.

    Transactions open with a deferred ``BEGIN`` so readers never hold the
    write lock. A connection carrying the ``WRITE_LOCK_OPTION`` execution
    option opens with ``BEGIN IMMEDIATE`` instead, which serializes writers
    before they read anything. SAVEPOINT works as documented either way.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection: Any, _connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn: Any) -> None:
        if conn.get_execution_options().get(WRITE_LOCK_OPTION):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")


def begin_write(session: Session) -> None:
    """Open the session's transaction as a writer.

    Has no effect when the session is already inside a transaction. Backends
    other than SQLite ignore the option and rely on row locks.
    """
    if not session.in_transaction():
        session.connection(execution_options={WRITE_LOCK_OPTION: True})


def build_engine(url: str, **kwargs: Any) -> Engine:
    """Create an engine for ``url`` with the dialect hooks this service relies on."""
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        connect_args.setdefault("timeout", settings.sqlite_busy_timeout_seconds)
        engine = create_engine(url, connect_args=connect_args, **kwargs)
        _install_sqlite_hooks(engine)
        return engine
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


engine = build_engine(settings.effective_database_url, echo=settings.sql_debug)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine | None = None) -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=bind or engine)
