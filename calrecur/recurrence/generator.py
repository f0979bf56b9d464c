"""Occurrence generator.

Expands a RecurrencePattern anchored at a series start into the concrete
occurrence instants that fall inside a half-open query window.

The generator never walks the series from its start. Each frequency jumps
straight to the first period that can reach the window and computes the
global occurrence index of that period in closed form, so `CountEnd` is
honored across windows while the cost stays proportional to the window.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, List, Tuple

from calrecur.models.recurrence import (
    CountEnd,
    NeverEnd,
    RecurrenceEnd,
    RecurrenceFrequency,
    RecurrencePattern,
    UntilEnd,
)
from calrecur.recurrence.dates import (
    at_time_of,
    days_in_month,
    first_day_of_month,
    month_ordinal,
    months_containing_day,
    start_of_day,
    start_of_iso_week,
)
from calrecur.recurrence.errors import InvalidIntervalError, InvalidWindowError

# (global occurrence index, instant)
Candidate = Tuple[int, datetime]


def generate(
    pattern: RecurrencePattern,
    series_start: datetime,
    window_start: datetime,
    window_end: datetime,
) -> List[datetime]:
    """Occurrences of `pattern` anchored at `series_start` within [window_start, window_end).

    Args:
        pattern: The recurrence rule
        series_start: The owning event's start; occurrence index 0 and the
            time-of-day of every occurrence
        window_start: Inclusive lower bound
        window_end: Exclusive upper bound

    Returns:
        Strictly ascending list of occurrence instants

    Raises:
        InvalidIntervalError: pattern.interval < 1
        InvalidWindowError: window_end < window_start
    """
    if pattern.interval < 1:
        raise InvalidIntervalError(pattern.interval)
    if window_end < window_start:
        raise InvalidWindowError(window_start, window_end)

    if _ends_before_start(pattern.end, series_start):
        return []
    lower = max(window_start, series_start)
    if lower >= window_end:
        return []

    if pattern.frequency == RecurrenceFrequency.DAILY:
        candidates = _daily(pattern, series_start, lower)
    elif pattern.frequency == RecurrenceFrequency.WEEKLY:
        candidates = _weekly(pattern, series_start, lower, window_end)
    elif pattern.frequency == RecurrenceFrequency.MONTHLY:
        candidates = _monthly(pattern, series_start, lower, window_end, pattern.interval)
    elif pattern.frequency == RecurrenceFrequency.YEARLY:
        candidates = _monthly(pattern, series_start, lower, window_end, 12 * pattern.interval)
    else:
        raise TypeError(f"Unsupported frequency: {pattern.frequency!r}")

    occurrences: List[datetime] = []
    for index, instant in candidates:
        if instant >= window_end or not _within_end(pattern.end, index, instant):
            break
        if instant >= lower:
            occurrences.append(instant)
    return occurrences


def _ends_before_start(end: RecurrenceEnd, series_start: datetime) -> bool:
    if isinstance(end, NeverEnd):
        return False
    if isinstance(end, CountEnd):
        return end.count <= 0
    if isinstance(end, UntilEnd):
        return end.until < series_start
    raise TypeError(f"Unsupported recurrence end: {end!r}")


def _within_end(end: RecurrenceEnd, index: int, instant: datetime) -> bool:
    if isinstance(end, NeverEnd):
        return True
    if isinstance(end, CountEnd):
        return index < end.count
    if isinstance(end, UntilEnd):
        return instant <= end.until
    raise TypeError(f"Unsupported recurrence end: {end!r}")


def _daily(pattern: RecurrencePattern, series_start: datetime, lower: datetime) -> Iterator[Candidate]:
    step = timedelta(days=pattern.interval)
    # Starts at or just before `lower`; generate() drops instants below it.
    index = (lower - series_start) // step
    instant = series_start + index * step
    while True:
        yield index, instant
        if datetime.max - instant < step:
            return
        index += 1
        instant += step


def _weekly(
    pattern: RecurrencePattern,
    series_start: datetime,
    lower: datetime,
    window_end: datetime,
) -> Iterator[Candidate]:
    """Weeks 0, interval, 2*interval, ... counted in ISO weeks from the anchor's week."""
    anchor = series_start.date()
    week0 = start_of_iso_week(anchor)
    weekdays = pattern.weekdays_for(anchor)
    # Week 0 only holds the weekdays on or after the anchor.
    first_week_count = sum(1 for wd in weekdays if wd >= anchor.isoweekday())

    span_days = 7 * pattern.interval
    period = max(0, (lower.date() - week0).days // span_days)
    index = 0 if period == 0 else first_week_count + (period - 1) * len(weekdays)

    while True:
        if (date.max - week0).days < period * span_days:
            return
        week_start = week0 + timedelta(days=period * span_days)
        if start_of_day(week_start) >= window_end:
            return
        for wd in weekdays:
            if (date.max - week_start).days < int(wd) - 1:
                return
            day = week_start + timedelta(days=int(wd) - 1)
            if day < anchor:
                continue
            yield index, at_time_of(day, series_start)
            index += 1
        period += 1


def _monthly(
    pattern: RecurrencePattern,
    series_start: datetime,
    lower: datetime,
    window_end: datetime,
    step: int,
) -> Iterator[Candidate]:
    """Months 0, step, 2*step, ... counted in calendar months from the anchor's month.

    Yearly patterns use this with `step = 12 * interval`, so their days fall in
    the anchor's month. Day values a month does not have are skipped.
    """
    anchor = series_start.date()
    first = month_ordinal(anchor)
    days = pattern.month_days_for(anchor)
    # Month 0 only holds the days on or after the anchor.
    first_month_count = sum(1 for d in days if anchor.day <= d <= days_in_month(first))

    period = max(0, (month_ordinal(lower) - first) // step)
    index = _monthly_index(first, step, days, first_month_count, period)

    last = month_ordinal(date.max)
    while True:
        ordinal = first + period * step
        if ordinal > last:
            return
        month_start = first_day_of_month(ordinal)
        if start_of_day(month_start) >= window_end:
            return
        length = days_in_month(ordinal)
        for d in days:
            if d > length:
                continue
            day = month_start.replace(day=d)
            if day < anchor:
                continue
            yield index, at_time_of(day, series_start)
            index += 1
        period += 1


def _monthly_index(first: int, step: int, days: List[int], first_month_count: int, period: int) -> int:
    """Global index of the first occurrence in included month number `period`."""
    if period == 0:
        return 0
    return first_month_count + sum(
        months_containing_day(first + step, step, period - 1, d) for d in days
    )

