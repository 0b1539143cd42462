"""db/repository.py — Storage access for events.

Every method is a single statement (or a single write + commit); nothing here
composes a multi-statement transaction. Failed writes roll the session back
and re-raise so the HTTP boundary reports them.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from .models import Event


class EventRepository:
    """CRUD plus the two derived lookups (by location, upcoming)."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Event]:
        return self.db.query(Event).order_by(Event.id).all()

    def find_by_id(self, event_id: int) -> Optional[Event]:
        return self.db.get(Event, event_id)

    def find_by_location(self, location: str) -> List[Event]:
        """Exact, case-sensitive match on the location column."""
        return (
            self.db.query(Event)
            .filter(Event.location == location)
            .order_by(Event.id)
            .all()
        )

    def find_upcoming(self, after: date) -> List[Event]:
        """Events dated strictly after `after`."""
        return (
            self.db.query(Event)
            .filter(Event.event_date > after)
            .order_by(Event.id)
            .all()
        )

    def save(self, event: Event) -> Event:
        """Insert or update `event`, commit, and return it with its id populated."""
        self.db.add(event)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(event)
        return event

    def delete(self, event: Event) -> None:
        self.db.delete(event)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
