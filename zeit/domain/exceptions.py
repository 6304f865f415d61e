"""
Domain-specific exception hierarchy for zeit.
"""


class ZeitError(Exception):
    """Base class for all library-level errors."""


class LayoutError(ZeitError, ValueError):
    """Raised when text is not a time of day formatted as "HH:MM:SS"."""


class SourceTypeError(ZeitError, TypeError):
    """Raised when a decoder receives a source value of an unsupported type."""


class IntervalError(ZeitError, ValueError):
    """Base class for violated time interval invariants."""


class LocationMismatchError(IntervalError):
    """Raised when the bounds of an interval carry different timezones."""


class DurationBoundError(IntervalError):
    """Raised when the bounds of an interval are 24 hours or more apart."""


class ScheduleFormatError(ZeitError, ValueError):
    """Raised when a serialized schedule does not have the expected shape."""
