"""FastAPI web application for calrecur.

A thin query surface over the recurrence engine for calendar front-ends.
Nothing is stored: every request carries the pattern or events it asks about.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from calrecur import __version__, config
from calrecur.engine.agenda import events_for_day, events_for_range
from calrecur.models.event import CalendarEvent
from calrecur.models.recurrence import RecurrencePattern
from calrecur.recurrence.errors import InvalidWindowError, RecurrenceError
from calrecur.recurrence.generator import generate
from calrecur.recurrence.resolver import occurrences_in_range, occurs_on_date
from calrecur.recurrence.rrule_export import pattern_to_rrule
from calrecur.recurrence.summary import describe_pattern

logger = logging.getLogger(__name__)

app = FastAPI(
    title="calrecur API",
    description="Expands recurring calendar events into concrete occurrences",
    version=__version__,
)


# Request models
class OccurrenceQuery(BaseModel):
    """Expand a bare pattern within a window."""
    pattern: RecurrencePattern
    series_start: datetime = Field(..., description="Series anchor (occurrence index 0)")
    window_start: datetime = Field(..., description="Inclusive window start")
    window_end: datetime = Field(..., description="Exclusive window end")


class EventRangeQuery(BaseModel):
    """Occurrences of one event within a window."""
    event: CalendarEvent
    range_start: datetime
    range_end: datetime


class EventDayQuery(BaseModel):
    """Does one event occur on a day?"""
    event: CalendarEvent
    day: date


class EventsDayQuery(BaseModel):
    """Events of a collection occurring on a day."""
    events: List[CalendarEvent]
    day: date


class EventsRangeQuery(BaseModel):
    """Events of a collection occurring on any day of an inclusive day range."""
    events: List[CalendarEvent]
    start_day: date
    end_day: date


class PatternQuery(BaseModel):
    pattern: RecurrencePattern


# Response models
class OccurrencesResponse(BaseModel):
    """Response for occurrence expansion."""
    count: int
    occurrences: List[datetime]


class OccursOnResponse(BaseModel):
    day: date
    occurs: bool


class EventsResponse(BaseModel):
    count: int
    events: List[CalendarEvent]


class RRuleResponse(BaseModel):
    rrule: str
    summary: str


def _check_window(start: datetime, end: datetime) -> None:
    """Reject inverted windows and windows larger than the configured maximum."""
    if end < start:
        raise InvalidWindowError(start, end)
    if end - start > timedelta(days=config.MAX_WINDOW_DAYS):
        raise HTTPException(
            status_code=400,
            detail=f"Query window exceeds {config.MAX_WINDOW_DAYS} days",
        )


@app.exception_handler(RecurrenceError)
async def recurrence_error_handler(request: Request, exc: RecurrenceError):
    """Malformed patterns and windows are caller errors."""
    logger.warning(f"Rejected {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
    return JSONResponse(status_code=400, content={"detail": str(exc), "error": type(exc).__name__})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/occurrences", response_model=OccurrencesResponse)
async def expand_pattern(query: OccurrenceQuery):
    """Expand a pattern anchored at series_start within [window_start, window_end)."""
    _check_window(query.window_start, query.window_end)
    occurrences = generate(query.pattern, query.series_start, query.window_start, query.window_end)
    logger.debug(f"Expanded {query.pattern.frequency.value} pattern: {len(occurrences)} occurrences")
    return OccurrencesResponse(count=len(occurrences), occurrences=occurrences)


@app.post("/events/occurrences", response_model=OccurrencesResponse)
async def event_occurrences(query: EventRangeQuery):
    """Occurrences of an event within [range_start, range_end), exceptions removed."""
    _check_window(query.range_start, query.range_end)
    occurrences = occurrences_in_range(query.event, query.range_start, query.range_end)
    logger.debug(f"Resolved event {query.event.id}: {len(occurrences)} occurrences")
    return OccurrencesResponse(count=len(occurrences), occurrences=occurrences)


@app.post("/events/occurs-on", response_model=OccursOnResponse)
async def event_occurs_on(query: EventDayQuery):
    """Whether an event occurs on a calendar day."""
    return OccursOnResponse(day=query.day, occurs=occurs_on_date(query.event, query.day))


@app.post("/events/day", response_model=EventsResponse)
async def day_events(query: EventsDayQuery):
    """Events occurring on a day, ordered by start."""
    events = events_for_day(query.events, query.day)
    return EventsResponse(count=len(events), events=events)


@app.post("/events/range", response_model=EventsResponse)
async def range_events(query: EventsRangeQuery):
    """Events occurring on any day from start_day to end_day (inclusive)."""
    if query.end_day < query.start_day:
        raise HTTPException(status_code=400, detail="end_day must be on or after start_day")
    if (query.end_day - query.start_day).days >= config.MAX_WINDOW_DAYS:
        raise HTTPException(
            status_code=400,
            detail=f"Query window exceeds {config.MAX_WINDOW_DAYS} days",
        )
    events = events_for_range(query.events, query.start_day, query.end_day)
    return EventsResponse(count=len(events), events=events)


@app.post("/patterns/rrule", response_model=RRuleResponse)
async def export_pattern(query: PatternQuery):
    """RRULE export and human summary for a pattern."""
    return RRuleResponse(rrule=pattern_to_rrule(query.pattern), summary=describe_pattern(query.pattern))
