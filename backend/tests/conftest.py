"""
conftest.py for backend/tests/

Every test gets a fresh in-memory SQLite database (single shared connection
via StaticPool), so no DATABASE_URL or running server is required.

Run from the project root:
    cd backend
    pytest tests -v
"""

import os
import sys
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

# Add backend/ to sys.path so `api`, `core`, `db`, ... import as top-level packages.
_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

from api.dependencies import get_db  # noqa: E402
from api.main import app  # noqa: E402
from db.database import Base, build_engine, create_schema  # noqa: E402
from db.repository import EventRepository  # noqa: E402
from services.event_service import EventService  # noqa: E402

# Fixed reference date for service-level tests
TODAY = date(2026, 10, 19)


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def engine():
    eng = build_engine("sqlite://")
    create_schema(eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def repository(session):
    return EventRepository(session)


@pytest.fixture()
def service(repository):
    return EventService(repository, today=lambda: TODAY)


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client(session_factory):
    """TestClient whose requests use the per-test in-memory database."""

    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
