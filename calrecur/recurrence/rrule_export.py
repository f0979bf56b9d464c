"""Export RecurrencePattern to iCalendar RRULE strings (export-only)."""

from __future__ import annotations

from typing import List

from calrecur.models.recurrence import (
    CountEnd,
    NeverEnd,
    RecurrenceFrequency,
    RecurrencePattern,
    UntilEnd,
    Weekday,
)


_WD_MAP: dict[Weekday, str] = {
    Weekday.MO: "MO",
    Weekday.TU: "TU",
    Weekday.WE: "WE",
    Weekday.TH: "TH",
    Weekday.FR: "FR",
    Weekday.SA: "SA",
    Weekday.SU: "SU",
}

_FREQ_MAP: dict[RecurrenceFrequency, str] = {
    RecurrenceFrequency.DAILY: "DAILY",
    RecurrenceFrequency.WEEKLY: "WEEKLY",
    RecurrenceFrequency.MONTHLY: "MONTHLY",
    RecurrenceFrequency.YEARLY: "YEARLY",
}


def pattern_to_rrule(p: RecurrencePattern) -> str:
    """Convert a pattern to an RRULE (without the leading 'RRULE:' prefix).

    Filters are only emitted for the frequencies that honor them. UNTIL is a
    floating local date-time (no trailing 'Z') because instants are naive.
    """
    parts: List[str] = [f"FREQ={_FREQ_MAP[p.frequency]}"]
    if p.interval != 1:
        parts.append(f"INTERVAL={p.interval}")
    if p.frequency == RecurrenceFrequency.WEEKLY and p.by_weekday:
        parts.append("BYDAY=" + ",".join(_WD_MAP[d] for d in sorted(p.by_weekday)))
    if p.frequency in (RecurrenceFrequency.MONTHLY, RecurrenceFrequency.YEARLY) and p.by_month_day:
        parts.append("BYMONTHDAY=" + ",".join(str(d) for d in sorted(p.by_month_day)))

    end = p.end
    if isinstance(end, UntilEnd):
        parts.append(f"UNTIL={end.until.strftime('%Y%m%dT%H%M%S')}")
    elif isinstance(end, CountEnd):
        parts.append(f"COUNT={end.count}")
    elif not isinstance(end, NeverEnd):
        raise TypeError(f"Unsupported recurrence end: {end!r}")
    return ";".join(parts)
