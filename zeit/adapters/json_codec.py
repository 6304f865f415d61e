"""
JSON encoding of time-of-day values and interval records.

Intervals are serialized as ``{"from": "HH:MM:SS", "to": "HH:MM:SS"}``.
"""

import json
from typing import Any, Dict, Iterable, List, Mapping, Union

from ..domain.exceptions import LayoutError, ScheduleFormatError
from ..domain.models import DEFAULT_TIMEZONE, TEXT_LENGTH, TimeInterval, TimeOfDay, TimezoneLike

# Canonical text plus the two surrounding quotes
QUOTED_LENGTH = TEXT_LENGTH + 2


def encode_time_of_day(value: TimeOfDay) -> str:
    """Encode a value as a JSON string literal."""
    return json.dumps(value.to_text())


def decode_time_of_day(
    raw: Union[str, bytes],
    tz: TimezoneLike = DEFAULT_TIMEZONE,
) -> TimeOfDay:
    """
    Decode a raw JSON string token such as ``"08:30:00"`` (quotes included).

    Raises:
        LayoutError: If the token is not a quoted "HH:MM:SS" literal
    """
    if isinstance(raw, bytes):
        try:
            token = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LayoutError(f"time token is not valid UTF-8: {raw!r}") from exc
    else:
        token = raw

    if len(token) != QUOTED_LENGTH or token[0] != '"' or token[-1] != '"':
        raise LayoutError(
            f'time must be formatted as "HH:MM:SS", got {token!r}'
        )

    return TimeOfDay.parse(token[1:-1], tz=tz)


def encode_interval(interval: TimeInterval) -> Dict[str, str]:
    return {"from": interval.start.to_text(), "to": interval.end.to_text()}


def decode_interval(
    record: Mapping[str, Any],
    tz: TimezoneLike = DEFAULT_TIMEZONE,
) -> TimeInterval:
    """
    Build an interval from a ``{"from": ..., "to": ...}`` record.

    Raises:
        ScheduleFormatError: If a bound is missing or not a string
        LayoutError: If a bound is not a valid "HH:MM:SS" literal
        IntervalError: If the bounds violate an interval invariant
    """
    bounds = []
    for key in ("from", "to"):
        value = record.get(key)
        if not isinstance(value, str):
            raise ScheduleFormatError(
                f"Interval record needs a string '{key}' field, got {record!r}"
            )
        bounds.append(value)

    return TimeInterval.parse_pair_in(bounds[0], bounds[1], tz)


def load_intervals(
    text: Union[str, bytes],
    tz: TimezoneLike = DEFAULT_TIMEZONE,
) -> List[TimeInterval]:
    """
    Parse a JSON array of interval records.

    Raises:
        ScheduleFormatError: If the document is not an array of objects
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ScheduleFormatError(f"Invalid JSON schedule: {exc}") from exc

    if not isinstance(data, list):
        raise ScheduleFormatError("Schedule must contain a list at the root level.")

    intervals: List[TimeInterval] = []
    for record in data:
        if not isinstance(record, dict):
            raise ScheduleFormatError(
                f"Schedule entries must be objects, got {record!r}"
            )
        intervals.append(decode_interval(record, tz=tz))

    return intervals


def dump_intervals(intervals: Iterable[TimeInterval]) -> str:
    return json.dumps([encode_interval(interval) for interval in intervals])
