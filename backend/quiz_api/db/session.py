"""
Process-scoped database resource.

A single ``Database`` owns the SQLAlchemy engine and session factory.
It is created when the application starts (see ``quiz_api.main``),
stored on ``app.state`` and disposed on shutdown.  Request handlers
obtain a short-lived ``Session`` through the ``get_db`` dependency;
scripts use ``Database.session()`` directly.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import sqlalchemy as sa
from fastapi import Request
from sqlalchemy import event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from quiz_api.core.config import settings
from quiz_api.db.base import Base

logger = logging.getLogger(__name__)


def _engine_options(url: sa.URL) -> dict:
    if url.get_backend_name() == "sqlite":
        options: dict = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every checkout sees an empty database
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT_SECONDS,
        "pool_recycle": settings.DB_POOL_RECYCLE_SECONDS,
        "pool_pre_ping": True,
    }


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_unicode_lower(dbapi_connection, connection_record):
    # builtin lower() only folds ASCII, so "Ângela" would never match "âng"
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def _enable_case_sensitive_like(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA case_sensitive_like = ON")
    finally:
        cursor.close()


class Database:
    def __init__(self, url: str, *, case_sensitive_like: bool | None = None):
        self.url = sa.make_url(url)
        self.engine = sa.create_engine(self.url, **_engine_options(self.url))

        if self.url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _register_unicode_lower)
        if case_sensitive_like is None:
            case_sensitive_like = settings.SEARCH_CASE_SENSITIVE
        if case_sensitive_like and self.url.get_backend_name() == "sqlite":
            # SQLite LIKE ignores ASCII case unless told otherwise
            event.listen(self.engine, "connect", _enable_case_sensitive_like)

        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        logger.info("Database engine created for %s", self.url.render_as_string(hide_password=True))

    def create_all(self) -> None:
        """Create every mapped table.  Used by tests; deployments run alembic."""
        import quiz_api.models  # noqa: F401

        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")


def get_db(request: Request) -> Iterator[Session]:
    database: Database = request.app.state.database
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
