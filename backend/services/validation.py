"""services/validation.py — Business rules an event must satisfy when written.

Rules are checked in a fixed order and the first violation wins:

    1. title present and not blank
    2. location present and not blank
    3. date present
    4. date not before today (today itself is allowed)
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from core.exceptions import InvalidEventError


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_event(
    title: Optional[str],
    location: Optional[str],
    event_date: Optional[date],
    today: Optional[date] = None,
) -> None:
    """Raise InvalidEventError naming the first violated rule.

    Args:
        today: Reference date for the "not in the past" rule. Defaults to the
               server's local date at call time.
    """
    if is_blank(title):
        raise InvalidEventError("Event title must not be empty")

    if is_blank(location):
        raise InvalidEventError("Event location must not be empty")

    if event_date is None:
        raise InvalidEventError("Event date is required")

    if event_date < (today or date.today()):
        raise InvalidEventError("Event date cannot be in the past")
