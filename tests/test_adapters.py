"""
Tests for the JSON and SQL adapters.
"""

import json
import logging

import pytest

from zeit.adapters.json_codec import (
    decode_interval,
    decode_time_of_day,
    dump_intervals,
    encode_time_of_day,
    load_intervals,
)
from zeit.adapters.json_schedule_source import JsonScheduleSource
from zeit.adapters.sql_codec import from_db_value, to_db_value
from zeit.domain.exceptions import LayoutError, ScheduleFormatError, SourceTypeError
from zeit.domain.models import TimeInterval, TimeOfDay

SCHEDULE = json.dumps(
    [
        {"from": "08:30:00", "to": "17:00:00"},
        {"from": "09:00:00", "to": "11:30:00"},
        {"from": "14:00:00", "to": "14:30:00"},
        {"from": "15:00:00", "to": "16:00:00"},
    ]
)


class TestJsonCodec:
    """Tests for the JSON codec."""

    def test_encode_time_of_day(self):
        """Test that a value encodes as a quoted literal."""
        assert encode_time_of_day(TimeOfDay.parse("08:30:00")) == '"08:30:00"'

    def test_decode_time_of_day(self):
        """Test decoding from text and bytes tokens."""
        assert decode_time_of_day('"08:30:00"').to_text() == "08:30:00"
        assert decode_time_of_day(b'"17:00:00"').to_text() == "17:00:00"

    @pytest.mark.parametrize("token", ['"8:30:00"', "08:30:00", '"08:30:00', '"14:30:69"'])
    def test_decode_time_of_day_rejects_bad_tokens(self, token):
        """Test that malformed tokens raise a layout error."""
        with pytest.raises(LayoutError):
            decode_time_of_day(token)

    def test_decode_time_of_day_rejects_invalid_utf8(self):
        """Test that undecodable bytes raise a layout error."""
        with pytest.raises(LayoutError, match="UTF-8"):
            decode_time_of_day(b'"\xff\xfe:00:00"')

    def test_load_intervals(self):
        """Test decoding a list of from/to records."""
        intervals = load_intervals(SCHEDULE)

        assert [interval.to_text() for interval in intervals] == [
            "08:30:00 - 17:00:00",
            "09:00:00 - 11:30:00",
            "14:00:00 - 14:30:00",
            "15:00:00 - 16:00:00",
        ]

    def test_load_intervals_in_timezone(self):
        """Test that records are read in the given timezone."""
        intervals = load_intervals(SCHEDULE, tz="Europe/Copenhagen")

        assert intervals[0].start.location == "Europe/Copenhagen"

    @pytest.mark.parametrize("text", ["{}", "[1, 2]", "not json"])
    def test_load_intervals_rejects_bad_documents(self, text):
        """Test that documents of the wrong shape are rejected."""
        with pytest.raises(ScheduleFormatError):
            load_intervals(text)

    def test_decode_interval_requires_both_bounds(self):
        """Test that a record without an end is rejected."""
        with pytest.raises(ScheduleFormatError, match="'to'"):
            decode_interval({"from": "08:30:00"})

    def test_decode_interval_propagates_layout_error(self):
        """Test that a bad bound is reported as a layout error."""
        with pytest.raises(LayoutError):
            decode_interval({"from": "08:30", "to": "09:00:00"})

    def test_dump_intervals(self):
        """Test that dumped intervals use the from/to record shape."""
        dumped = dump_intervals([TimeInterval.parse_pair("09:00:00", "11:30:00")])

        assert json.loads(dumped) == [{"from": "09:00:00", "to": "11:30:00"}]


class TestSqlCodec:
    """Tests for the SQL column codec."""

    def test_to_db_value(self):
        """Test that values are stored as canonical text."""
        assert to_db_value(TimeOfDay.parse("23:10:05")) == "23:10:05"

    def test_from_db_value_text_and_bytes(self):
        """Test decoding text and byte columns."""
        assert from_db_value("23:10:05").to_text() == "23:10:05"
        assert from_db_value(b"23:10:05").to_text() == "23:10:05"

    def test_from_db_value_null_and_empty(self):
        """Test that NULL and empty text decode to the unset sentinel."""
        assert from_db_value(None).is_zero()
        assert from_db_value("").is_zero()
        assert from_db_value(b"").is_zero()

    def test_from_db_value_unsupported_type(self):
        """Test that other column types are rejected."""
        with pytest.raises(SourceTypeError, match="int"):
            from_db_value(42)

        with pytest.raises(TypeError):
            from_db_value(3.5)

    def test_from_db_value_bad_text(self):
        """Test that malformed text raises a layout error."""
        with pytest.raises(LayoutError):
            from_db_value("25:00:00")

    def test_from_db_value_invalid_utf8(self):
        """Test that undecodable byte columns raise a layout error."""
        with pytest.raises(LayoutError, match="UTF-8"):
            from_db_value(b"\xff\xfe:00:00:")


class TestJsonScheduleSource:
    """Tests for JsonScheduleSource."""

    def test_missing_file_is_empty(self, tmp_path, caplog):
        """Test that a missing schedule is logged and treated as empty."""
        source = JsonScheduleSource(tmp_path / "missing.json")

        with caplog.at_level(logging.WARNING, logger="zeit.adapters.json_schedule_source"):
            intervals = source.load()

        assert intervals == []
        assert "not found" in caplog.text

    def test_get_occupied_filters_by_window(self, tmp_path):
        """Test that entries outside the window are skipped."""
        schedule_file = tmp_path / "busy.json"
        schedule_file.write_text(SCHEDULE, encoding="utf-8")
        source = JsonScheduleSource(schedule_file)

        occupied = source.get_occupied(TimeInterval.parse_pair("13:00:00", "14:30:00"))

        assert [interval.to_text() for interval in occupied] == [
            "08:30:00 - 17:00:00",
            "14:00:00 - 14:30:00",
        ]
