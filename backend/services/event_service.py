"""
Event service — use cases for creating, reading, updating and deleting events.

Each operation runs validate → map → persist → map back against an
EventRepository. Failures are raised as core.exceptions types and are never
caught here; api/errors.py translates them to HTTP responses.

Usage:
    >>> service = EventService(EventRepository(db_session))
    >>> created = service.create(EventDTO(title="Conf", location="NYC",
    ...                                   event_date=date(2030, 1, 1)))
    >>> service.get_by_id(created.id)
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List

from core.exceptions import EventNotFoundError, InvalidEventError
from db.models import Event
from db.repository import EventRepository
from schemas.event import EventDTO
from services.mapping import apply_to_entity, to_dto, to_entity
from services.validation import is_blank, validate_event

logger = logging.getLogger(__name__)


class EventService:
    """
    Orchestrates the event use cases on top of a repository.

    Args:
        repository: Storage access for events.
        today:      Callable returning the reference "today" for date rules.
                    Defaults to the server's local date.
    """

    def __init__(self, repository: EventRepository, today: Callable[[], date] = date.today):
        self.repository = repository
        self.today = today

    def create(self, dto: EventDTO) -> EventDTO:
        self._validate(dto)
        return to_dto(self.repository.save(to_entity(dto)))

    def get_all(self) -> List[EventDTO]:
        return [to_dto(e) for e in self.repository.find_all()]

    def get_by_id(self, event_id: int) -> EventDTO:
        return to_dto(self._get_or_raise(event_id))

    def update(self, event_id: int, dto: EventDTO) -> EventDTO:
        """Full overwrite of an existing event.

        The payload is validated before the id is looked up, so an invalid
        payload for a missing id reports InvalidEventError, not
        EventNotFoundError. Nothing is written unless validation passes.
        """
        self._validate(dto)
        event = self._get_or_raise(event_id)
        apply_to_entity(event, dto)
        return to_dto(self.repository.save(event))

    def delete(self, event_id: int) -> None:
        self.repository.delete(self._get_or_raise(event_id))

    def get_by_location(self, location: str) -> List[EventDTO]:
        if is_blank(location):
            raise InvalidEventError("Location must not be empty")
        return [to_dto(e) for e in self.repository.find_by_location(location)]

    def get_upcoming(self) -> List[EventDTO]:
        return [to_dto(e) for e in self.repository.find_upcoming(self.today())]

    # ── internals ─────────────────────────────────────────────────────────────

    def _validate(self, dto: EventDTO) -> None:
        validate_event(dto.title, dto.location, dto.event_date, today=self.today())

    def _get_or_raise(self, event_id: int) -> Event:
        event = self.repository.find_by_id(event_id)
        if event is None:
            logger.debug("event lookup missed", extra={"event_id": event_id})
            raise EventNotFoundError(event_id)
        return event
