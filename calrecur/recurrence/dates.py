"""Calendar-day arithmetic shared by the generator and resolver.

All helpers work on naive local wall-clock values. Months are addressed by an
ordinal (`year * 12 + month - 1`) so that month stepping is plain integer math.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from math import gcd
from typing import Iterable, List, Union


DateLike = Union[date, datetime]


def as_date(value: DateLike) -> date:
    """Calendar day of a date or datetime (time-of-day dropped)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(value: DateLike) -> datetime:
    return datetime.combine(as_date(value), time.min)


def next_day_start(value: DateLike) -> datetime:
    """Midnight after the day of `value`; `datetime.max` on the last representable day."""
    d = as_date(value)
    if d == date.max:
        return datetime.max
    return start_of_day(d + timedelta(days=1))


def at_time_of(day: date, anchor: datetime) -> datetime:
    """`day` at the anchor's wall-clock time (sub-second precision included)."""
    return datetime.combine(day, anchor.timetz())


def date_range(start: DateLike, end: DateLike) -> List[date]:
    """Every calendar day from start to end, inclusive."""
    first = as_date(start)
    last = as_date(end)
    return [first + timedelta(days=i) for i in range((last - first).days + 1)]


def start_of_iso_week(d: date) -> date:
    """Monday of the ISO week containing `d`."""
    return d - timedelta(days=d.isoweekday() - 1)


def month_ordinal(d: DateLike) -> int:
    return d.year * 12 + d.month - 1


def first_day_of_month(ordinal: int) -> date:
    year, month0 = divmod(ordinal, 12)
    return date(year, month0 + 1, 1)


def days_in_month(ordinal: int) -> int:
    year, month0 = divmod(ordinal, 12)
    if month0 == 1 and calendar.isleap(year):
        return 29
    return calendar.mdays[month0 + 1]


def _count_periodic(n: int, hits: List[bool]) -> int:
    """How many of the first `n` terms are hits, for a sequence repeating `hits`."""
    full, rem = divmod(n, len(hits))
    return full * sum(hits) + sum(hits[:rem])


def months_containing_day(first: int, step: int, n: int, day: int) -> int:
    """Count months among `first, first+step, ...` (`n` of them) that have a `day`-th day.

    Month lengths repeat every 12 months except February, whose length follows
    the 400-year leap cycle, so the count is computed per period instead of
    walking every month.
    """
    if n <= 0:
        return 0
    if day <= 28:
        return n

    period = 12 // gcd(12, step)
    if day >= 30:
        # February never has a 30th, so the year does not matter here.
        return _count_periodic(n, [days_in_month(first + j * step) >= day for j in range(period)])

    # day == 29: only February of a common year lacks it.
    feb_offsets = [j for j in range(period) if (first + j * step) % 12 == 1]
    if not feb_offsets or feb_offsets[0] >= n:
        return n
    j0 = feb_offsets[0]
    februaries = (n - 1 - j0) // period + 1
    first_year = (first + j0 * step) // 12
    year_step = period * step // 12
    cycle = 400 // gcd(400, year_step)
    common_years = [not calendar.isleap(first_year + t * year_step) for t in range(cycle)]
    return n - _count_periodic(februaries, common_years)


def unique_sorted(values: Iterable[datetime]) -> List[datetime]:
    return sorted(set(values))
