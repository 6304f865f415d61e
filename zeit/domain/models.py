"""
Domain models for time-of-day values and the intervals between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Sequence, Union

import pendulum
from pendulum import DateTime, Duration, FixedTimezone, Timezone

from .exceptions import DurationBoundError, LayoutError, LocationMismatchError

TimezoneLike = Union[str, Timezone, FixedTimezone]


TIME_LAYOUT = "HH:mm:ss"
TEXT_LENGTH = 8
SECONDS_PER_DAY = 24 * 60 * 60
DEFAULT_TIMEZONE = "UTC"

# Parsed values are placed on this date so they compare by clock alone.
REFERENCE_DATE = (1970, 1, 1)

ZERO_INSTANT = pendulum.datetime(1, 1, 1, tz="UTC")


@dataclass(frozen=True, eq=False)
class TimeOfDay:
    """
    A point within one 24-hour cycle, backed by an absolute instant.

    Only hour, minute and second are observed. Identity is decided by
    ``equal`` on the canonical "HH:MM:SS" form, while ``before`` and
    ``after`` compare the underlying instants, so sub-second differences
    are visible to ordering but not to equality.
    """
    moment: DateTime

    @classmethod
    def parse(cls, text: str, tz: TimezoneLike = DEFAULT_TIMEZONE) -> "TimeOfDay":
        """
        Parse an "HH:MM:SS" literal as a wall-clock time in ``tz``.

        Raises:
            LayoutError: If the text is not exactly eight characters or
                does not describe a valid time of day
        """
        if len(text) != TEXT_LENGTH:
            raise LayoutError(
                f'time must be formatted as "HH:MM:SS", got {text!r}'
            )

        # Layout only; an unknown tz surfaces from pendulum.datetime below
        try:
            parsed = pendulum.from_format(text, TIME_LAYOUT)
        except ValueError as exc:
            raise LayoutError(
                f'time must be formatted as "HH:MM:SS", got {text!r}'
            ) from exc

        moment = pendulum.datetime(
            *REFERENCE_DATE,
            hour=parsed.hour,
            minute=parsed.minute,
            second=parsed.second,
            tz=tz,
        )

        # Reject loose matches such as single-digit fields
        if moment.format(TIME_LAYOUT) != text:
            raise LayoutError(
                f'time must be formatted as "HH:MM:SS", got {text!r}'
            )

        return cls(moment=moment)

    @classmethod
    def now(cls, tz: TimezoneLike = DEFAULT_TIMEZONE) -> "TimeOfDay":
        """Capture the current instant, in UTC unless told otherwise."""
        return cls.now_in(tz)

    @classmethod
    def now_in(cls, tz: TimezoneLike) -> "TimeOfDay":
        """Capture the current instant in the given timezone."""
        return cls(moment=pendulum.now(tz))

    @classmethod
    def from_instant(cls, instant: datetime) -> "TimeOfDay":
        """
        Wrap an externally supplied instant, keeping its timezone.

        Naive instants are read as UTC.
        """
        return cls(moment=pendulum.instance(instant))

    @classmethod
    def zero(cls) -> "TimeOfDay":
        """Return the unset sentinel."""
        return cls(moment=ZERO_INSTANT)

    @property
    def location(self) -> str:
        """Name of the timezone carried by the underlying instant."""
        return self.moment.timezone_name or ""

    def add(self, duration: timedelta) -> "TimeOfDay":
        """Return a new value advanced by ``duration``; midnight may be crossed."""
        return TimeOfDay(moment=self.moment + duration)

    def before(self, other: "TimeOfDay") -> bool:
        return self.moment < other.moment

    def after(self, other: "TimeOfDay") -> bool:
        return self.moment > other.moment

    def equal(self, other: "TimeOfDay") -> bool:
        """Compare at whole-second resolution through the canonical form."""
        return self.to_text() == other.to_text()

    def is_zero(self) -> bool:
        return self.moment == ZERO_INSTANT

    def within(self, interval: "TimeInterval") -> bool:
        """Check membership in the half-open range [start, end)."""
        return not self.before(interval.start) and self.before(interval.end)

    def to_text(self) -> str:
        return self.moment.format(TIME_LAYOUT)

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True, eq=False)
class TimeInterval:
    """
    An ordered pair of times of day sharing one timezone.

    Invariants:
    - start and end report the same timezone
    - the elapsed span between them is strictly less than 24 hours
    """
    start: TimeOfDay
    end: TimeOfDay

    def __post_init__(self):
        if self.start.location != self.end.location:
            raise LocationMismatchError(
                f"Location of start ({self.start.location}) and end "
                f"({self.end.location}) must be equal"
            )

        span = _elapsed_seconds(self.start, self.end)
        if abs(span) >= SECONDS_PER_DAY:
            raise DurationBoundError(
                f"Interval {self.start} - {self.end} spans {abs(span):.0f}s, "
                f"must be less than 24 hours"
            )

    @classmethod
    def from_pair(cls, start: TimeOfDay, end: TimeOfDay) -> "TimeInterval":
        """
        Create a validated interval from two times of day.

        Raises:
            LocationMismatchError: If the timezones differ
            DurationBoundError: If the bounds are 24 hours or more apart
        """
        return cls(start=start, end=end)

    @classmethod
    def from_instants(cls, start: datetime, end: datetime) -> "TimeInterval":
        """Create an interval from two instants, e.g. to use another timezone."""
        return cls.from_pair(TimeOfDay.from_instant(start), TimeOfDay.from_instant(end))

    @classmethod
    def parse_pair(cls, from_text: str, to_text: str) -> "TimeInterval":
        """
        Create an interval from two "HH:MM:SS" literals.

        ex. TimeInterval.parse_pair("10:15:00", "23:00:30")
        """
        return cls.parse_pair_in(from_text, to_text, DEFAULT_TIMEZONE)

    @classmethod
    def parse_pair_in(
        cls,
        from_text: str,
        to_text: str,
        tz: TimezoneLike,
    ) -> "TimeInterval":
        """Create an interval from two literals read as wall-clock times in ``tz``."""
        start = TimeOfDay.parse(from_text, tz=tz)
        end = TimeOfDay.parse(to_text, tz=tz)

        return cls.from_pair(start, end)

    def duration(self) -> Duration:
        """Return the signed duration from start to end."""
        return pendulum.duration(seconds=_elapsed_seconds(self.start, self.end))

    def add(self, duration: timedelta) -> "TimeInterval":
        """Shift both bounds and validate the result."""
        return TimeInterval.from_pair(self.start.add(duration), self.end.add(duration))

    def is_zero(self) -> bool:
        """Report whether either bound is unset."""
        return self.start.is_zero() or self.end.is_zero()

    def to_text(self) -> str:
        return f"{self.start.to_text()} - {self.end.to_text()}"

    def __str__(self) -> str:
        return self.to_text()

    # Algebra shortcuts; the implementations live in ``algebra``.

    def split(self, slot: timedelta) -> List["TimeInterval"]:
        from .algebra import split

        return split(self, slot)

    def split_offset(self, step: timedelta, slot: timedelta) -> List["TimeInterval"]:
        from .algebra import split_offset

        return split_offset(self, step, slot)

    def split_filter(
        self,
        slot: timedelta,
        exceptions: Sequence["TimeInterval"],
    ) -> List["TimeInterval"]:
        from .algebra import split_filter

        return split_filter(self, slot, exceptions)

    def exclude(self, occupied: Sequence["TimeInterval"]) -> List["TimeInterval"]:
        from .algebra import exclude

        return exclude(self, occupied)

    def overlaps(self, other: "TimeInterval") -> bool:
        from .algebra import overlapping

        return overlapping(self, other)


def _elapsed_seconds(start: TimeOfDay, end: TimeOfDay) -> float:
    return end.moment.timestamp() - start.moment.timestamp()
