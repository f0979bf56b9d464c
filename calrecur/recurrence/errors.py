"""Typed errors raised by the recurrence engine.

Malformed input fails fast with one of these. Well-formed but degenerate
patterns (an until date before the series start, ``count=0``, a month day
that never exists) are not errors and simply produce no occurrences.
"""


class RecurrenceError(Exception):
    """Base class for recurrence engine errors."""


class InvalidIntervalError(RecurrenceError):
    """A pattern's interval is below 1."""

    def __init__(self, interval):
        super().__init__(f"interval must be >= 1 (got {interval!r})")
        self.interval = interval


class InvalidWindowError(RecurrenceError):
    """A query window ends before it starts."""

    def __init__(self, window_start, window_end):
        super().__init__(
            f"window_end ({window_end.isoformat()}) is before window_start ({window_start.isoformat()})"
        )
        self.window_start = window_start
        self.window_end = window_end
