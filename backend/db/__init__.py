"""Database package for the Event Management API."""

from .database import Base, engine, SessionLocal, build_engine, create_schema
from .models import Event
from .repository import EventRepository

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "create_schema",
    "Event",
    "EventRepository",
]
