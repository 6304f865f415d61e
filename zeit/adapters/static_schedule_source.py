"""
Schedule source over intervals already held in memory.
"""

from typing import List, Sequence

from ..domain.algebra import overlapping
from ..domain.models import TimeInterval


class StaticScheduleSource:
    """Serves a fixed list of occupied intervals, e.g. from command-line options."""

    def __init__(self, intervals: Sequence[TimeInterval]):
        self._intervals = list(intervals)

    def get_occupied(self, window: TimeInterval) -> List[TimeInterval]:
        return [
            busy for busy in self._intervals
            if overlapping(busy, window)
        ]
