"""services/mapping.py — Field-for-field copies between EventDTO and the Event row."""

from __future__ import annotations

from db.models import Event
from schemas.event import EventDTO


def to_entity(dto: EventDTO) -> Event:
    # id is deliberately not copied: the database assigns it on insert
    return Event(
        title=dto.title,
        description=dto.description,
        location=dto.location,
        event_date=dto.event_date,
    )


def to_dto(event: Event) -> EventDTO:
    return EventDTO(
        id=event.id,
        title=event.title,
        description=event.description,
        location=event.location,
        event_date=event.event_date,
    )


def apply_to_entity(event: Event, dto: EventDTO) -> Event:
    """Overwrite every mutable field of `event` with the values in `dto`."""
    event.title = dto.title
    event.description = dto.description
    event.location = dto.location
    event.event_date = dto.event_date
    return event
