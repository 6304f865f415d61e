"""
Interval algebra over TimeInterval values.

This is the heart of the library - pure functions without any external
dependencies (no clock, no I/O, no shared state). Every operation consumes
already validated intervals and returns new ones, so none of them can fail
for well-formed input.
"""

from datetime import timedelta
from typing import List, Sequence

from .models import TimeInterval


def split(interval: TimeInterval, slot: timedelta) -> List[TimeInterval]:
    """
    Partition an interval into consecutive slots of equal length.

    The number of slots is floor(duration / slot). A remainder shorter than
    one slot is dropped rather than returned as a short final slot.

    Example:
    Interval: 08:30 - 17:00, slot: 2h
    Result: [08:30-10:30, 10:30-12:30, 12:30-14:30, 14:30-16:30]
    """
    count = _fits(interval, slot)
    slots: List[TimeInterval] = []
    cursor = interval.start

    for _ in range(count):
        slot_end = cursor.add(slot)
        slots.append(TimeInterval.from_pair(cursor, slot_end))
        cursor = slot_end

    return slots


def split_offset(
    interval: TimeInterval,
    step: timedelta,
    slot: timedelta,
) -> List[TimeInterval]:
    """
    Generate slots of length ``slot`` whose starts are ``step`` apart.

    Candidate starts are interval.start + n * step for
    n < floor(duration / step). A candidate is kept only while its slot ends
    strictly before interval.end; the first candidate that does not fit stops
    the generation, later candidates are never examined.

    With step < slot the slots overlap, e.g. a 30 minute window rolling
    forward every 15 minutes.
    """
    if slot.total_seconds() <= 0:
        return []

    count = _fits(interval, step)
    slots: List[TimeInterval] = []
    cursor = interval.start

    for _ in range(count):
        slot_end = cursor.add(slot)
        if not slot_end.before(interval.end):
            break

        slots.append(TimeInterval.from_pair(cursor, slot_end))
        cursor = cursor.add(step)

    return slots


def exclude(
    interval: TimeInterval,
    occupied: Sequence[TimeInterval],
) -> List[TimeInterval]:
    """
    Subtract occupied intervals from a window, yielding the free gaps.

    ``occupied`` must be sorted and non-overlapping within the window.
    A gap is emitted before every occupied interval, even when it is empty;
    the trailing gap is emitted only if the cursor has not reached the end.

    Example:
    Window: 08:30 - 17:00
    Occupied: [09:00-11:30, 14:00-14:30, 15:00-16:00]
    Result: [08:30-09:00, 11:30-14:00, 14:30-15:00, 16:00-17:00]
    """
    if not occupied:
        return [interval]

    free: List[TimeInterval] = []
    cursor = interval.start

    for busy in occupied:
        free.append(TimeInterval.from_pair(cursor, busy.start))
        cursor = busy.end

    if not cursor.equal(interval.end):
        free.append(TimeInterval.from_pair(cursor, interval.end))

    return free


def overlapping(a: TimeInterval, b: TimeInterval) -> bool:
    """
    Check whether two intervals share more than a boundary instant.

    Back-to-back intervals such as 09:00-11:00 and 11:00-13:00 do not
    overlap. Membership of an endpoint is tested against the half-open
    range of the other interval.
    """
    if a.start.before(b.start) and a.end.after(b.end):
        return not a.end.equal(b.start)

    if a.start.within(b) or a.end.within(b):
        return not a.end.equal(b.start)

    # Mirrored test: b may end together with a longer a
    if b.start.within(a) or b.end.within(a):
        return not b.end.equal(a.start)

    return False


def split_filter(
    interval: TimeInterval,
    slot: timedelta,
    exceptions: Sequence[TimeInterval],
) -> List[TimeInterval]:
    """Split an interval and drop every slot overlapping one of ``exceptions``."""
    return drop_overlapping(split(interval, slot), exceptions)


def drop_overlapping(
    slots: Sequence[TimeInterval],
    exceptions: Sequence[TimeInterval],
) -> List[TimeInterval]:
    """Keep the slots that overlap none of ``exceptions``, in their original order."""
    return [
        candidate for candidate in slots
        if not any(overlapping(candidate, exception) for exception in exceptions)
    ]


def _fits(interval: TimeInterval, length: timedelta) -> int:
    """Number of whole ``length`` units in the interval, zero if none fit."""
    length_seconds = length.total_seconds()
    if length_seconds <= 0:
        return 0

    return max(0, int(interval.duration().total_seconds() // length_seconds))
