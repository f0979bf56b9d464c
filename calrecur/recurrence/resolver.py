"""Occurrence resolver.

Combines generated occurrences with an event's own span and its exception
dates. Exception dates take absolute precedence over both sources.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from calrecur.models.event import CalendarEvent
from calrecur.recurrence.dates import DateLike, as_date, next_day_start, start_of_day, unique_sorted
from calrecur.recurrence.errors import InvalidWindowError
from calrecur.recurrence.generator import generate


def occurs_on_date(event: CalendarEvent, day: DateLike) -> bool:
    """Whether `event` occurs on the calendar day of `day` (time-of-day ignored)."""
    target = as_date(day)
    if target in event.exception_dates:
        return False

    if event.start_date.date() <= target <= event.end_date.date():
        return True

    if event.recurrence is not None:
        return bool(generate(event.recurrence, event.start_date, start_of_day(target), next_day_start(target)))

    return False


def _span_instants(event: CalendarEvent, range_start: datetime, range_end: datetime) -> List[datetime]:
    """One instant per calendar day where the event's own span meets [range_start, range_end).

    Each is the first instant of that day's slice of the span inside the range:
    `start_date` on the first day, midnight on the days the event runs into.
    """
    instants = []
    for day in event.date_range:
        instant = max(event.start_date, start_of_day(day), range_start)
        if instant < range_end and instant < next_day_start(day) and instant <= event.end_date:
            instants.append(instant)
    return instants


def occurrences_in_range(event: CalendarEvent, range_start: datetime, range_end: datetime) -> List[datetime]:
    """Occurrence instants of `event` within [range_start, range_end), ascending and unique.

    The event's own span contributes the instants from `_span_instants`; the
    recurrence contributes its generated instants. Instants on an exception
    date are dropped from both.
    """
    if range_end < range_start:
        raise InvalidWindowError(range_start, range_end)

    instants = _span_instants(event, range_start, range_end)
    if event.recurrence is not None:
        instants.extend(generate(event.recurrence, event.start_date, range_start, range_end))

    return unique_sorted(i for i in instants if i.date() not in event.exception_dates)
