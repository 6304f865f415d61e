"""
Application service for listing bookable slots inside a window.

The service fetches occupied intervals through a schedule source and
delegates the arithmetic to the domain algebra. Occupied intervals are
normalised first (sorted, clipped to the window, merged) because
``exclude`` expects a sorted, non-overlapping sequence.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import List, Optional, Protocol, Sequence

from ..domain.algebra import exclude, split, split_offset
from ..domain.models import TimeInterval, TimeOfDay

logger = logging.getLogger(__name__)


class ScheduleSourceProtocol(Protocol):
    """Protocol describing the schedule source behaviour needed by the planner."""

    def get_occupied(self, window: TimeInterval) -> List[TimeInterval]:
        """Return occupied intervals relevant to the window."""


class SlotPlanner:
    """
    Orchestrates occupied-time retrieval and slot calculation.

    Depending on a protocol keeps the planner independent of where the
    schedule comes from (a JSON file, a database, a test stub).
    """

    def __init__(self, schedule_source: ScheduleSourceProtocol) -> None:
        self._schedule_source = schedule_source

    def find_slots(
        self,
        *,
        window: TimeInterval,
        slot: timedelta,
        step: Optional[timedelta] = None,
    ) -> List[TimeInterval]:
        """
        Retrieve occupied data, normalise it, and compute bookable slots.
        """
        occupied = self.fetch_occupied(window=window)

        return self.calculate_slots(
            window=window,
            occupied=occupied,
            slot=slot,
            step=step,
        )

    def fetch_occupied(self, *, window: TimeInterval) -> List[TimeInterval]:
        """Fetch occupied intervals and normalise them against the window."""
        occupied = self._schedule_source.get_occupied(window)
        normalized = self._normalize_occupied(window, occupied)

        logger.debug(
            "Window %s: %d occupied entries, %d after normalisation",
            window, len(occupied), len(normalized),
        )
        return normalized

    def calculate_slots(
        self,
        *,
        window: TimeInterval,
        occupied: Sequence[TimeInterval],
        slot: timedelta,
        step: Optional[timedelta] = None,
    ) -> List[TimeInterval]:
        """
        Split every free gap of the window into slots.

        Without ``step`` the gaps are split back to back; with ``step`` the
        slots start every ``step`` and may overlap each other.
        """
        slots: List[TimeInterval] = []

        for gap in self.free_intervals(window=window, occupied=occupied):
            if step is None:
                slots.extend(split(gap, slot))
            else:
                slots.extend(split_offset(gap, step, slot))

        return slots

    @staticmethod
    def free_intervals(
        *,
        window: TimeInterval,
        occupied: Sequence[TimeInterval],
    ) -> List[TimeInterval]:
        """Gaps of the window not covered by ``occupied``, without empty gaps."""
        return [
            gap for gap in exclude(window, occupied)
            if gap.end.after(gap.start)
        ]

    @staticmethod
    def _normalize_occupied(
        window: TimeInterval,
        occupied: Sequence[TimeInterval],
    ) -> List[TimeInterval]:
        """
        Sort, clip and merge occupied intervals.

        Example:
        Window: 09:00 - 17:00
        Occupied: [12:00-13:00, 08:00-10:00, 12:30-14:00]
        Result: [09:00-10:00, 12:00-14:00]
        """
        ordered = sorted(occupied, key=lambda busy: busy.start.moment)
        merged: List[TimeInterval] = []

        for busy in ordered:
            start = _latest(busy.start, window.start)
            end = _earliest(busy.end, window.end)

            # Entirely outside the window
            if not end.after(start):
                continue

            if merged and not start.after(merged[-1].end):
                last = merged[-1]
                merged[-1] = TimeInterval.from_pair(last.start, _latest(last.end, end))
            else:
                merged.append(TimeInterval.from_pair(start, end))

        return merged


def _latest(a: TimeOfDay, b: TimeOfDay) -> TimeOfDay:
    return b if b.after(a) else a


def _earliest(a: TimeOfDay, b: TimeOfDay) -> TimeOfDay:
    return b if b.before(a) else a
