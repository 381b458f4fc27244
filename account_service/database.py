"""Database configuration and session management."""

from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from account_service.config import Settings

Base: Any = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """Create the bounded connection pool for the configured store.

    The pool never grows past ``db_pool_size``; a caller that finds every
    connection checked out waits up to ``db_pool_timeout`` seconds.
    """
    url = settings.sqlalchemy_url
    connect_args = {"check_same_thread": False} if str(url).startswith("sqlite") else {}
    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    # Import all models here so they are registered with Base.metadata
    from account_service import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
