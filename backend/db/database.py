"""Database connection and session management."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """Create an engine with driver-appropriate connection settings.

    SQLite connections are shared across FastAPI's threadpool, and the
    in-memory variant ("sqlite://") is pinned to a single connection so every
    session sees the same database. PostgreSQL gets a sized pool with
    pre-ping.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,        # Number of connections to maintain
        max_overflow=20,     # Maximum overflow connections
        connect_args={
            "connect_timeout": 10,
            "options": "-c client_encoding=utf8",
        },
    )


engine = build_engine(settings.database_url)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()


def create_schema(bind: Engine = None) -> None:
    """Create any missing tables for the registered models."""
    # Import for the side effect of registering the models on Base.metadata
    from db import models  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ensured", extra={"tables": sorted(Base.metadata.tables)})
