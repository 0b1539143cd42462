from schemas.shared import ErrorResponse
from schemas.event import EventDTO

__all__ = [
    "ErrorResponse",
    "EventDTO",
]
