"""
Domain layer - Pure time-of-day logic without external collaborators.
"""

from .algebra import drop_overlapping, exclude, overlapping, split, split_filter, split_offset
from .exceptions import (
    DurationBoundError,
    IntervalError,
    LayoutError,
    LocationMismatchError,
    ScheduleFormatError,
    SourceTypeError,
    ZeitError,
)
from .models import TimeInterval, TimeOfDay

__all__ = [
    "TimeOfDay",
    "TimeInterval",
    "split",
    "split_offset",
    "split_filter",
    "drop_overlapping",
    "exclude",
    "overlapping",
    "ZeitError",
    "LayoutError",
    "SourceTypeError",
    "IntervalError",
    "LocationMismatchError",
    "DurationBoundError",
    "ScheduleFormatError",
]
