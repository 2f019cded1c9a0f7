from __future__ import annotations

import logging
from typing import Any, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.core.config import settings

_LOG = logging.getLogger("app.db")


class Base(DeclarativeBase):
    pass


def _engine_kwargs(url: str) -> dict[str, Any]:
    backend = make_url(url).get_backend_name()
    kwargs: dict[str, Any] = {"pool_pre_ping": True}
    if backend == "postgresql":
        connect_args: dict[str, Any] = {}
        if settings.DB_SSL:
            connect_args["sslmode"] = "require"
        if settings.DB_STATEMENT_TIMEOUT_MS > 0:
            connect_args["options"] = f"-c statement_timeout={int(settings.DB_STATEMENT_TIMEOUT_MS)}"
        kwargs["connect_args"] = connect_args
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
    elif backend == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
    if settings.DB_SCHEMA.strip():
        kwargs["execution_options"] = {"schema_translate_map": {None: settings.DB_SCHEMA.strip()}}
    return kwargs


def build_engine(url: str | None = None) -> Engine:
    target = url or settings.database_url
    return create_engine(target, **_engine_kwargs(target))


engine = build_engine()
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_database_connection(bind: Engine | None = None) -> None:
    """Run ``SELECT 1`` against the store; any failure propagates to the caller."""
    target = bind or engine
    with target.connect() as conn:
        conn.execute(text("SELECT 1"))
    _LOG.debug("database connectivity check passed url=%s", target.url.render_as_string(hide_password=True))
