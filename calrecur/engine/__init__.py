"""Calendar query engine for calrecur."""

from calrecur.engine.agenda import (
    event_count_for_day,
    events_for_day,
    events_for_range,
    filter_by_category,
    filter_by_priority,
    filter_by_status,
    has_events_on_day,
)

__all__ = [
    "event_count_for_day",
    "events_for_day",
    "events_for_range",
    "filter_by_category",
    "filter_by_priority",
    "filter_by_status",
    "has_events_on_day",
]
