"""
zeit - time-of-day values, intervals and the algebra between them.
"""

from .domain import (
    DurationBoundError,
    LayoutError,
    LocationMismatchError,
    SourceTypeError,
    TimeInterval,
    TimeOfDay,
    ZeitError,
    drop_overlapping,
    exclude,
    overlapping,
    split,
    split_filter,
    split_offset,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
    "LocationMismatchError",
    "DurationBoundError",
]
