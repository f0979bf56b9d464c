"""Calendar queries over a collection of events.

These are the lookups a calendar view needs for a day cell or a visible
range. Every function is pure; callers that re-render often may memoize
results per (event set, window) on their side.
"""

from typing import Iterable, List

from calrecur.models.event import CalendarEvent, EventPriority, EventStatus
from calrecur.recurrence.dates import DateLike, as_date, next_day_start, start_of_day
from calrecur.recurrence.resolver import occurrences_in_range, occurs_on_date


def _by_start(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    return sorted(events, key=lambda e: (e.start_date, e.id))


def events_for_day(events: Iterable[CalendarEvent], day: DateLike) -> List[CalendarEvent]:
    """Events occurring on `day`, ordered by start."""
    return _by_start(e for e in events if occurs_on_date(e, day))


def events_for_range(events: Iterable[CalendarEvent], start_day: DateLike, end_day: DateLike) -> List[CalendarEvent]:
    """Events occurring on any calendar day from start_day to end_day (inclusive).

    Each event appears once even when it occurs on several days of the range.
    """
    window_start = start_of_day(start_day)
    window_end = next_day_start(end_day)
    seen = {}
    for e in events:
        if e.id in seen:
            continue
        if occurrences_in_range(e, window_start, window_end):
            seen[e.id] = e
    return _by_start(seen.values())


def has_events_on_day(events: Iterable[CalendarEvent], day: DateLike) -> bool:
    return any(occurs_on_date(e, day) for e in events)


def event_count_for_day(events: Iterable[CalendarEvent], day: DateLike) -> int:
    return len(events_for_day(events, as_date(day)))


def filter_by_category(events: Iterable[CalendarEvent], category: str) -> List[CalendarEvent]:
    return [e for e in events if e.category == category]


def filter_by_priority(events: Iterable[CalendarEvent], priority: EventPriority) -> List[CalendarEvent]:
    return [e for e in events if e.priority == priority]


def filter_by_status(events: Iterable[CalendarEvent], status: EventStatus) -> List[CalendarEvent]:
    return [e for e in events if e.status == status]
