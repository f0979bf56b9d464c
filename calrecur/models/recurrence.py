"""Recurrence models for calrecur.

Canonical in-memory representation of a repeating rule. A pattern never owns
its series anchor: the anchor is the owning event's start and is passed to the
generator alongside the pattern.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum, IntEnum
from typing import Annotated, FrozenSet, List, Literal, Union

from pydantic import BaseModel, Field, field_serializer, field_validator

from calrecur.recurrence.errors import InvalidIntervalError


class RecurrenceFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Weekday(IntEnum):
    """ISO weekday numbering (Monday=1 ... Sunday=7)."""

    MO = 1
    TU = 2
    WE = 3
    TH = 4
    FR = 5
    SA = 6
    SU = 7

    @classmethod
    def of(cls, d: date) -> "Weekday":
        return cls(d.isoweekday())


_WEEKDAY_ALIASES: dict[str, Weekday] = {
    "mo": Weekday.MO,
    "mon": Weekday.MO,
    "monday": Weekday.MO,
    "tu": Weekday.TU,
    "tue": Weekday.TU,
    "tuesday": Weekday.TU,
    "we": Weekday.WE,
    "wed": Weekday.WE,
    "wednesday": Weekday.WE,
    "th": Weekday.TH,
    "thu": Weekday.TH,
    "thursday": Weekday.TH,
    "fr": Weekday.FR,
    "fri": Weekday.FR,
    "friday": Weekday.FR,
    "sa": Weekday.SA,
    "sat": Weekday.SA,
    "saturday": Weekday.SA,
    "su": Weekday.SU,
    "sun": Weekday.SU,
    "sunday": Weekday.SU,
}


class NeverEnd(BaseModel):
    """The series continues indefinitely."""

    type: Literal["never"] = "never"

    class Config:
        frozen = True


class UntilEnd(BaseModel):
    """The series stops at or before `until` (inclusive)."""

    type: Literal["until"] = "until"
    until: datetime

    class Config:
        frozen = True


class CountEnd(BaseModel):
    """The series stops after `count` occurrences, counted from the series start."""

    type: Literal["count"] = "count"
    count: int = Field(..., ge=0, description="Total occurrences in the whole series")

    class Config:
        frozen = True


RecurrenceEnd = Annotated[Union[NeverEnd, UntilEnd, CountEnd], Field(discriminator="type")]


class RecurrencePattern(BaseModel):
    """Immutable description of a repeating rule.

    Notes:
    - `by_weekday` only applies to weekly patterns; empty means the anchor's weekday.
    - `by_month_day` only applies to monthly/yearly patterns; empty means the anchor's day.
    - A day that does not exist in a given month is skipped for that month, never clamped.
    - `interval < 1` raises InvalidIntervalError here, at construction time.
    """

    frequency: RecurrenceFrequency
    interval: int = Field(1, description="Every N units (days/weeks/months/years)")
    by_weekday: FrozenSet[Weekday] = Field(
        default_factory=frozenset, description="For weekly recurrence: ISO weekdays on which it occurs"
    )
    by_month_day: FrozenSet[int] = Field(
        default_factory=frozenset, description="For monthly/yearly recurrence: days of the month (1-31)"
    )
    end: RecurrenceEnd = Field(default_factory=NeverEnd, description="Termination rule")

    class Config:
        frozen = True

    @field_validator("interval")
    @classmethod
    def _validate_interval(cls, v):
        if v < 1:
            raise InvalidIntervalError(v)
        return v

    @field_validator("by_weekday", mode="before")
    @classmethod
    def _coerce_by_weekday(cls, v):
        if v is None:
            return frozenset()
        out = set()
        for day in v:
            if isinstance(day, str):
                key = day.strip().lower()
                if key.isdigit():
                    day = int(key)
                elif key in _WEEKDAY_ALIASES:
                    day = _WEEKDAY_ALIASES[key]
                else:
                    raise ValueError(f"unknown weekday: {day!r}")
            out.add(day)
        return out

    @field_validator("by_month_day", mode="before")
    @classmethod
    def _coerce_by_month_day(cls, v):
        if v is None:
            return frozenset()
        return v

    @field_validator("by_month_day")
    @classmethod
    def _validate_by_month_day(cls, v):
        for day in v:
            if day < 1 or day > 31:
                raise ValueError(f"by_month_day values must be within 1..31 (got {day})")
        return v

    @field_serializer("by_weekday", "by_month_day")
    def _serialize_sorted(self, v) -> List[int]:
        return sorted(int(x) for x in v)

    def weekdays_for(self, anchor: date) -> List[Weekday]:
        """Weekdays of an included week, ascending; the anchor's weekday when unfiltered."""
        if self.by_weekday:
            return sorted(self.by_weekday)
        return [Weekday.of(anchor)]

    def month_days_for(self, anchor: date) -> List[int]:
        """Days of an included month, ascending; the anchor's day when unfiltered."""
        if self.by_month_day:
            return sorted(self.by_month_day)
        return [anchor.day]

    def with_changes(self, **updates) -> "RecurrencePattern":
        """Return a new, re-validated pattern with the given fields replaced."""
        data = self.model_dump()
        data.update(updates)
        return RecurrencePattern.model_validate(data)
