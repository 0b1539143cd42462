"""core/exceptions.py — Domain failures raised by the service layer.

These are never caught below the HTTP boundary; api/errors.py turns each one
into a JSON error response.
"""


class EventServiceError(Exception):
    """Base class for every failure the event service raises on purpose."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EventNotFoundError(EventServiceError):
    """The referenced event id does not exist."""

    def __init__(self, event_id):
        super().__init__(f"Event not found with id: {event_id}")
        self.event_id = event_id


class InvalidEventError(EventServiceError):
    """A business rule on the event payload (or lookup argument) was violated."""
