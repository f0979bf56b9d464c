"""Human-readable summaries of recurrence patterns."""

from calrecur.models.recurrence import (
    CountEnd,
    NeverEnd,
    RecurrenceEnd,
    RecurrenceFrequency,
    RecurrencePattern,
    UntilEnd,
)

_UNITS = {
    RecurrenceFrequency.DAILY: ("Daily", "days"),
    RecurrenceFrequency.WEEKLY: ("Weekly", "weeks"),
    RecurrenceFrequency.MONTHLY: ("Monthly", "months"),
    RecurrenceFrequency.YEARLY: ("Yearly", "years"),
}

_DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def describe_end(end: RecurrenceEnd) -> str:
    if isinstance(end, NeverEnd):
        return "never ends"
    if isinstance(end, UntilEnd):
        return f"until {end.until.isoformat()}"
    if isinstance(end, CountEnd):
        return f"after {end.count} occurrences"
    raise TypeError(f"Unsupported recurrence end: {end!r}")


def describe_pattern(p: RecurrencePattern) -> str:
    """Summarize a pattern, e.g. "Every 2 weeks on Mon, Wed, after 10 occurrences"."""
    single, plural = _UNITS[p.frequency]
    text = single if p.interval == 1 else f"Every {p.interval} {plural}"

    if p.frequency == RecurrenceFrequency.WEEKLY and p.by_weekday:
        text += " on " + ", ".join(_DAY_NAMES[int(d) - 1] for d in sorted(p.by_weekday))
    elif p.frequency in (RecurrenceFrequency.MONTHLY, RecurrenceFrequency.YEARLY) and p.by_month_day:
        text += " on day " + ", ".join(str(d) for d in sorted(p.by_month_day))

    if not isinstance(p.end, NeverEnd):
        text += ", " + describe_end(p.end)
    return text
