"""
Schedule source backed by a JSON file of occupied intervals.
"""

import logging
from pathlib import Path
from typing import List

from ..domain.algebra import overlapping
from ..domain.models import DEFAULT_TIMEZONE, TimeInterval, TimezoneLike
from .json_codec import load_intervals

logger = logging.getLogger(__name__)


class JsonScheduleSource:
    """
    Reads occupied intervals from a JSON file.

    The file holds a list of ``{"from": "HH:MM:SS", "to": "HH:MM:SS"}``
    records, all read as wall-clock times in one timezone.
    """

    def __init__(self, path: Path, tz: TimezoneLike = DEFAULT_TIMEZONE):
        """
        Initialize the source.

        Args:
            path: Path to the JSON schedule file
            tz: Timezone the records are expressed in
        """
        self.path = path
        self.tz = tz

    def load(self) -> List[TimeInterval]:
        """Load every interval in the file, or none if the file is missing."""
        if not self.path.exists():
            logger.warning("Schedule file %s not found, treating schedule as empty", self.path)
            return []

        with open(self.path, "r", encoding="utf-8") as f:
            intervals = load_intervals(f.read(), tz=self.tz)

        logger.debug("Loaded %d occupied intervals from %s", len(intervals), self.path)
        return intervals

    def get_occupied(self, window: TimeInterval) -> List[TimeInterval]:
        """Return the occupied intervals that overlap the window."""
        return [
            busy for busy in self.load()
            if overlapping(busy, window)
        ]
