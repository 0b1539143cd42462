"""Business logic for the Event Management API."""

from services.event_service import EventService
from services.validation import validate_event

__all__ = ["EventService", "validate_event"]
