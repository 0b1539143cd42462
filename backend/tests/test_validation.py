"""
Unit tests for services/validation.py — pure function, no database.

Run from the project root:
    cd backend
    pytest tests/test_validation.py -v
"""

from datetime import date, timedelta

import pytest

from core.exceptions import InvalidEventError
from services.validation import is_blank, validate_event

TODAY = date(2026, 10, 19)
TOMORROW = TODAY + timedelta(days=1)
YESTERDAY = TODAY - timedelta(days=1)


class TestIsBlank:

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n  "])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["x", "  Paris ", "0"])
    def test_non_blank_values(self, value):
        assert not is_blank(value)


class TestValidateEventAccepts:

    def test_future_date(self):
        assert validate_event("Conf", "NYC", TOMORROW, today=TODAY) is None

    def test_today_is_not_in_the_past(self):
        assert validate_event("Conf", "NYC", TODAY, today=TODAY) is None

    def test_defaults_to_server_date(self):
        validate_event("Conf", "NYC", date.today() + timedelta(days=30))


class TestValidateEventRejects:
    """Each rule on its own, with every earlier rule satisfied."""

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_blank_title(self, title):
        with pytest.raises(InvalidEventError, match="Event title must not be empty"):
            validate_event(title, "NYC", TOMORROW, today=TODAY)

    @pytest.mark.parametrize("location", [None, "", "   "])
    def test_blank_location(self, location):
        with pytest.raises(InvalidEventError, match="Event location must not be empty"):
            validate_event("Conf", location, TOMORROW, today=TODAY)

    def test_missing_date(self):
        with pytest.raises(InvalidEventError, match="Event date is required"):
            validate_event("Conf", "NYC", None, today=TODAY)

    def test_past_date(self):
        with pytest.raises(InvalidEventError, match="Event date cannot be in the past"):
            validate_event("Conf", "NYC", YESTERDAY, today=TODAY)


class TestValidateEventPrecedence:
    """When several rules fail, the first in order is reported."""

    def test_title_beats_everything(self):
        with pytest.raises(InvalidEventError) as exc_info:
            validate_event("", "", None, today=TODAY)
        assert exc_info.value.message == "Event title must not be empty"

    def test_location_beats_date(self):
        with pytest.raises(InvalidEventError) as exc_info:
            validate_event("Conf", " ", YESTERDAY, today=TODAY)
        assert exc_info.value.message == "Event location must not be empty"

    def test_missing_date_reported_before_past_check(self):
        with pytest.raises(InvalidEventError) as exc_info:
            validate_event("Conf", "NYC", None, today=TODAY)
        assert exc_info.value.message == "Event date is required"
