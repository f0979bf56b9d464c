"""calrecur: recurrence-occurrence engine for calendar events."""

__version__ = "0.1.0"
