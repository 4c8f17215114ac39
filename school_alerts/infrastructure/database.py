"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Callable, Generator

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from school_alerts.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


SessionFactory = Callable[[], Session]

settings = get_settings()

logger = logging.getLogger(__name__)


def _build_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for ``database_url``.

    Alert collectors run in worker threads, each with its own session, so
    SQLite connections must not be pinned to the creating thread.
    """

    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        logger.debug("Using SQLite database at %s", database_url)
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


engine = _build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from school_alerts.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory() -> SessionFactory:
    """Return the factory used to open one session per concurrent collector."""

    return SessionLocal


__all__ = [
    "Base",
    "SessionFactory",
    "SessionLocal",
    "engine",
    "get_db",
    "get_session_factory",
    "initialize_database",
]
