"""schemas/event.py — Event request/response schema.

DB source: events — id, title, description, location, event_date

Only types are enforced here (a malformed date is a schema failure). The
non-blank / not-in-the-past rules belong to services/validation.py so the
client sees the business-rule message, not a generic field error.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EventDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    event_date: Optional[date] = Field(
        None,
        alias="eventDate",
        description="ISO-8601 date (YYYY-MM-DD); must not be in the past",
    )
