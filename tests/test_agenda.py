"""Tests for multi-event calendar queries."""

from datetime import date, datetime

from calrecur.engine.agenda import (
    event_count_for_day,
    events_for_day,
    events_for_range,
    filter_by_category,
    filter_by_priority,
    filter_by_status,
    has_events_on_day,
)
from calrecur.models.event import CalendarEvent, EventPriority, EventStatus
from calrecur.models.recurrence import RecurrenceFrequency, RecurrencePattern, Weekday


def _events(sample_event_base):
    lunch = CalendarEvent(
        **{
            **sample_event_base,
            "id": "lunch",
            "title": "Lunch",
            "start_date": datetime(2024, 1, 1, 12, 0),
            "end_date": datetime(2024, 1, 1, 13, 0),
            "category": "personal",
            "recurrence": RecurrencePattern(
                frequency=RecurrenceFrequency.WEEKLY, by_weekday={Weekday.MO, Weekday.TH}
            ),
        }
    )
    review = CalendarEvent(
        **{
            **sample_event_base,
            "id": "review",
            "title": "Review",
            "start_date": datetime(2024, 1, 4, 8, 0),
            "end_date": datetime(2024, 1, 4, 9, 0),
            "priority": EventPriority.HIGH,
            "status": EventStatus.TENTATIVE,
        }
    )
    return [lunch, review]


class TestDayQueries:
    """Test events_for_day() and friends."""

    def test_events_for_day_sorted_by_start(self, sample_event_base, daily_event):
        events = _events(sample_event_base) + [daily_event]
        result = events_for_day(events, date(2024, 1, 4))
        assert [e.id for e in result] == ["evt-1", "lunch", "review"]

    def test_exception_hides_event(self, sample_event_base, daily_event):
        events = _events(sample_event_base) + [daily_event]
        assert [e.id for e in events_for_day(events, date(2024, 1, 3))] == []
        assert has_events_on_day(events, date(2024, 1, 3)) is False

    def test_count(self, sample_event_base, daily_event):
        events = _events(sample_event_base) + [daily_event]
        assert event_count_for_day(events, date(2024, 1, 8)) == 2
        assert event_count_for_day(events, datetime(2024, 1, 9, 18, 0)) == 1


class TestRangeQueries:
    """Test events_for_range() de-duplication and bounds."""

    def test_each_event_once(self, sample_event_base, daily_event):
        events = _events(sample_event_base) + [daily_event]
        result = events_for_range(events, date(2024, 1, 1), date(2024, 1, 31))
        assert [e.id for e in result] == ["evt-1", "lunch", "review"]

    def test_end_day_inclusive(self, sample_event_base):
        events = _events(sample_event_base)
        assert [e.id for e in events_for_range(events, date(2024, 1, 2), date(2024, 1, 3))] == []
        assert [e.id for e in events_for_range(events, date(2024, 1, 2), date(2024, 1, 4))] == ["lunch", "review"]


class TestFilters:
    def test_filters(self, sample_event_base):
        events = _events(sample_event_base)
        assert [e.id for e in filter_by_category(events, "personal")] == ["lunch"]
        assert [e.id for e in filter_by_priority(events, EventPriority.HIGH)] == ["review"]
        assert [e.id for e in filter_by_status(events, EventStatus.TENTATIVE)] == ["review"]


class TestRangeBounds:
    def test_range_ending_on_last_representable_day(self, sample_event_base):
        event = CalendarEvent(
            **{
                **sample_event_base,
                "start_date": datetime(9999, 12, 31, 9, 0),
                "end_date": datetime(9999, 12, 31, 10, 0),
            }
        )
        assert [e.id for e in events_for_range([event], date(9999, 12, 30), date(9999, 12, 31))] == ["evt-1"]
