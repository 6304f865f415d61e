"""
Adapters translating time-of-day values to and from external formats.
"""

from .json_codec import (
    decode_interval,
    decode_time_of_day,
    dump_intervals,
    encode_interval,
    encode_time_of_day,
    load_intervals,
)
from .json_schedule_source import JsonScheduleSource
from .sql_codec import from_db_value, to_db_value
from .static_schedule_source import StaticScheduleSource

__all__ = [
    "encode_time_of_day",
    "decode_time_of_day",
    "encode_interval",
    "decode_interval",
    "load_intervals",
    "dump_intervals",
    "to_db_value",
    "from_db_value",
    "JsonScheduleSource",
    "StaticScheduleSource",
]
