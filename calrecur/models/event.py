"""CalendarEvent data model for calrecur."""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from calrecur.models.recurrence import RecurrencePattern
from calrecur.recurrence.dates import as_date, date_range


class EventPriority(str, Enum):
    """Event priority enumeration."""
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class EventStatus(str, Enum):
    """Event status enumeration."""
    CONFIRMED = "confirmed"
    TENTATIVE = "tentative"
    CANCELLED = "cancelled"


class CalendarEvent(BaseModel):
    """Canonical calendar event.

    The event owns its series anchor (`start_date`) and its exception dates;
    `recurrence` only describes how the event repeats. Events are replaced,
    never patched: use `model_copy(update=...)` or build a new one.
    """

    id: str = Field(..., description="Unique event identifier")
    title: str = Field(..., description="Event title")
    description: Optional[str] = Field(None, description="Event description")
    start_date: datetime = Field(..., description="Event start; anchor of its recurrence series")
    end_date: datetime = Field(..., description="Event end (>= start_date)")
    is_all_day: bool = Field(False, description="Whether the event covers whole days")
    location: Optional[str] = Field(None, description="Event location")
    category: Optional[str] = Field(None, description="Free-form event category")
    priority: EventPriority = Field(EventPriority.NORMAL, description="Event priority")
    status: EventStatus = Field(EventStatus.CONFIRMED, description="Event status")
    recurrence: Optional[RecurrencePattern] = Field(None, description="Recurrence pattern, if repeating")
    exception_dates: FrozenSet[date] = Field(
        default_factory=frozenset, description="Calendar days on which a repeating event is suppressed"
    )
    custom_data: Optional[Dict[str, Any]] = Field(None, description="Caller-owned metadata")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @field_validator("exception_dates", mode="before")
    @classmethod
    def _coerce_exception_dates(cls, v):
        if v is None:
            return frozenset()
        out = set()
        for d in v:
            if isinstance(d, str):
                d = datetime.fromisoformat(d) if "T" in d else date.fromisoformat(d)
            out.add(as_date(d))
        return out

    @field_serializer("exception_dates")
    def _serialize_exception_dates(self, v) -> List[date]:
        return sorted(v)

    @model_validator(mode="after")
    def _validate_span(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must be after or equal to start_date")
        return self

    @classmethod
    def with_duration(
        cls,
        *,
        id: str,
        title: str,
        start_date: datetime,
        duration_days: int,
        **kwargs,
    ) -> "CalendarEvent":
        """Create an all-day range event covering start_date .. start_date + duration_days."""
        return cls(
            id=id,
            title=title,
            start_date=start_date,
            end_date=start_date + timedelta(days=duration_days),
            is_all_day=True,
            **kwargs,
        )

    @property
    def is_multi_day(self) -> bool:
        return self.is_all_day and self.start_date.date() != self.end_date.date()

    @property
    def date_range(self) -> List[date]:
        """Calendar days covered by the event's own span, inclusive."""
        return date_range(self.start_date, self.end_date)

    def current_day(self, day) -> Optional[int]:
        """1-based position of `day` within a multi-day event (e.g. day 3 of 7)."""
        if not self.is_multi_day:
            return None
        target = as_date(day)
        first = self.start_date.date()
        if first <= target <= self.end_date.date():
            return (target - first).days + 1
        return None

    @property
    def total_days(self) -> int:
        return len(self.date_range) if self.is_multi_day else 1

    @property
    def duration_minutes(self) -> int:
        return int((self.end_date - self.start_date).total_seconds() // 60)

    @property
    def duration_hours(self) -> float:
        return self.duration_minutes / 60.0

    @property
    def is_cancelled(self) -> bool:
        return self.status == EventStatus.CANCELLED

    @property
    def is_tentative(self) -> bool:
        return self.status == EventStatus.TENTATIVE

    def is_happening(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now()
        return self.start_date < now < self.end_date

    def is_past(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now()
        return self.end_date < now

    def is_future(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now()
        return self.start_date > now
