"""Pytest fixtures and configuration for calrecur tests."""

import pytest
from datetime import datetime
from fastapi.testclient import TestClient

from calrecur.models.event import CalendarEvent, EventPriority, EventStatus
from calrecur.models.recurrence import CountEnd, RecurrenceFrequency, RecurrencePattern


@pytest.fixture
def series_start():
    """Monday 2024-01-01 at 09:30, the anchor most tests use."""
    return datetime(2024, 1, 1, 9, 30)


@pytest.fixture
def sample_event_base(series_start):
    """Base event data for creating test events.

    Returns a dict with default event attributes that can be overridden.
    """
    return {
        "id": "evt-1",
        "title": "Standup",
        "description": "Daily sync",
        "start_date": series_start,
        "end_date": series_start.replace(hour=10),
        "is_all_day": False,
        "location": None,
        "category": "work",
        "priority": EventPriority.NORMAL,
        "status": EventStatus.CONFIRMED,
        "recurrence": None,
        "exception_dates": [],
    }


@pytest.fixture
def sample_event(sample_event_base):
    """A one-off (non-recurring) event."""
    return CalendarEvent(**sample_event_base)


@pytest.fixture
def daily_pattern():
    """Daily, ten occurrences."""
    return RecurrencePattern(frequency=RecurrenceFrequency.DAILY, end=CountEnd(count=10))


@pytest.fixture
def daily_event(sample_event_base, daily_pattern):
    """Daily recurring event with an exception on 2024-01-03."""
    return CalendarEvent(
        **{
            **sample_event_base,
            "recurrence": daily_pattern,
            "exception_dates": [datetime(2024, 1, 3)],
        }
    )


@pytest.fixture
def test_client():
    """FastAPI test client."""
    from calrecur.api.app import app

    with TestClient(app) as client:
        yield client
