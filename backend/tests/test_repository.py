"""
Tests for db/repository.py against an in-memory SQLite database.

Run from the project root:
    cd backend
    pytest tests/test_repository.py -v
"""

from datetime import date

import pytest

from db.models import Event


def _event(title="Conf", location="NYC", event_date=date(2030, 1, 1), description=None):
    return Event(title=title, location=location, event_date=event_date, description=description)


class TestSave:

    def test_assigns_distinct_ids(self, repository):
        first = repository.save(_event(title="A"))
        second = repository.save(_event(title="B"))
        assert first.id is not None
        assert second.id is not None
        assert first.id != second.id

    def test_update_in_place_keeps_id(self, repository):
        event = repository.save(_event())
        original_id = event.id
        event.title = "Renamed"
        repository.save(event)
        assert repository.find_by_id(original_id).title == "Renamed"
        assert len(repository.find_all()) == 1

    def test_failed_commit_rolls_back_and_raises(self, repository):
        with pytest.raises(Exception):
            repository.save(Event(title=None, location="NYC", event_date=date(2030, 1, 1)))
        # Session is usable again after the rollback
        assert repository.save(_event()).id is not None


class TestFind:

    def test_find_all_in_insertion_order(self, repository):
        for title in ("one", "two", "three"):
            repository.save(_event(title=title))
        assert [e.title for e in repository.find_all()] == ["one", "two", "three"]

    def test_find_by_id_missing_returns_none(self, repository):
        assert repository.find_by_id(9999) is None

    def test_find_by_location_is_exact_and_case_sensitive(self, repository):
        repository.save(_event(title="a", location="Paris"))
        repository.save(_event(title="b", location="paris"))
        repository.save(_event(title="c", location="Paris, TX"))
        repository.save(_event(title="d", location="Paris"))

        found = repository.find_by_location("Paris")
        assert [e.title for e in found] == ["a", "d"]

    def test_find_upcoming_is_strictly_after(self, repository):
        cutoff = date(2026, 10, 19)
        repository.save(_event(title="yesterday", event_date=date(2026, 10, 18)))
        repository.save(_event(title="today", event_date=cutoff))
        repository.save(_event(title="tomorrow", event_date=date(2026, 10, 20)))

        assert [e.title for e in repository.find_upcoming(cutoff)] == ["tomorrow"]


class TestDelete:

    def test_delete_removes_row(self, repository):
        event = repository.save(_event())
        event_id = event.id
        repository.delete(event)
        assert repository.find_by_id(event_id) is None
        assert repository.find_all() == []
