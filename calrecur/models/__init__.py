"""Data models for calrecur."""

from calrecur.models.recurrence import (
    CountEnd,
    NeverEnd,
    RecurrenceEnd,
    RecurrenceFrequency,
    RecurrencePattern,
    UntilEnd,
    Weekday,
)
from calrecur.models.event import CalendarEvent, EventPriority, EventStatus

__all__ = [
    "CountEnd",
    "NeverEnd",
    "RecurrenceEnd",
    "RecurrenceFrequency",
    "RecurrencePattern",
    "UntilEnd",
    "Weekday",
    "CalendarEvent",
    "EventPriority",
    "EventStatus",
]
