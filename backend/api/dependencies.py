"""
dependencies.py — FastAPI dependency injection

Provides get_db() and get_event_service() for use with Depends() in route
handlers. FastAPI manages the session lifecycle (open on request start, close
on request end, even if an error occurs).

Usage in a route handler:
    from fastapi import Depends
    from api.dependencies import get_event_service

    @router.get("/example")
    def example(service: EventService = Depends(get_event_service)):
        return service.get_all()
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from db.database import SessionLocal
from db.repository import EventRepository
from services.event_service import EventService


def get_db() -> Generator[Session, None, None]:
    """Yield a database session, guaranteed to close after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_event_service(db: Session = Depends(get_db)) -> EventService:
    """Build a request-scoped EventService on the request's session."""
    return EventService(EventRepository(db))


def check_db_connectivity(db: Session) -> bool:
    """Execute SELECT 1 to verify the database is reachable.

    Returns:
        True if the database responds.

    Raises:
        RuntimeError: with a descriptive message if the connection fails.
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as exc:
        raise RuntimeError(f"Database connectivity check failed: {exc}") from exc
