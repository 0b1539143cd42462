"""
events.py — Event endpoints

Routes (mounted under /api/events):
    POST   /create                Create an event
    GET    /                      List all events
    GET    /upcoming              Events dated after today
    GET    /location/{location}   Events at exactly this location
    GET    /{id}                  Single event
    PUT    /{id}                  Overwrite an event
    DELETE /{id}                  Delete an event

Static paths are registered before /{id} so "upcoming" is never parsed as an id.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.dependencies import get_event_service
from schemas.event import EventDTO
from schemas.shared import ErrorResponse
from services.event_service import EventService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/events",
    tags=["events"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post("/create", response_model=EventDTO, summary="Create event")
def create_event(dto: EventDTO, service: EventService = Depends(get_event_service)):
    logger.info("Creating event with title: %s", dto.title)
    created = service.create(dto)
    logger.info("Event created with id: %s", created.id)
    return created


@router.get("", response_model=list[EventDTO], summary="List events")
def list_events(service: EventService = Depends(get_event_service)):
    logger.info("Fetching all events")
    events = service.get_all()
    logger.info("Total events fetched: %d", len(events))
    return events


@router.get("/upcoming", response_model=list[EventDTO], summary="Upcoming events")
def upcoming_events(service: EventService = Depends(get_event_service)):
    logger.info("Fetching upcoming events")
    events = service.get_upcoming()
    logger.info("Upcoming events count: %d", len(events))
    return events


@router.get("/location/{location}", response_model=list[EventDTO], summary="Events by location")
def events_by_location(location: str, service: EventService = Depends(get_event_service)):
    logger.info("Fetching events by location: %s", location)
    events = service.get_by_location(location)
    logger.info("Events fetched for location '%s': %d", location, len(events))
    return events


@router.get("/{event_id}", response_model=EventDTO, summary="Get event")
def get_event(event_id: int, service: EventService = Depends(get_event_service)):
    logger.info("Fetching event with id: %s", event_id)
    event = service.get_by_id(event_id)
    logger.info("Event fetched: %s", event.title)
    return event


@router.put("/{event_id}", response_model=EventDTO, summary="Update event")
def update_event(event_id: int, dto: EventDTO, service: EventService = Depends(get_event_service)):
    logger.info("Updating event with id: %s", event_id)
    updated = service.update(event_id, dto)
    logger.info("Event updated: %s", updated.title)
    return updated


@router.delete("/{event_id}", response_class=PlainTextResponse, summary="Delete event")
def delete_event(event_id: int, service: EventService = Depends(get_event_service)):
    logger.info("Deleting event with id: %s", event_id)
    service.delete(event_id)
    logger.info("Event deleted with id: %s", event_id)
    return "Event deleted successfully"
