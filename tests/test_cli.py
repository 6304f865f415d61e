"""
Tests for the command-line interface.
"""

import json

from typer.testing import CliRunner

from zeit import __version__
from zeit.cli.app import app

runner = CliRunner()


def test_split_command():
    """Splitting the working day should list four two-hour slots."""
    result = runner.invoke(app, ["split", "08:30:00", "17:00:00", "--slot", "120"])

    assert result.exit_code == 0
    assert "14:30:00" in result.output
    assert "16:30:00" in result.output
    assert "17:00:00" in result.output  # title


def test_split_command_with_exception():
    """Excepted intervals should not be listed."""
    result = runner.invoke(
        app,
        ["split", "09:00:00", "12:00:00", "--slot", "60", "--except", "10:00:00-11:00:00"],
    )

    assert result.exit_code == 0
    assert "09:00:00 │ 10:00:00" in result.output
    assert "11:00:00 │ 12:00:00" in result.output
    assert "10:00:00 │ 11:00:00" not in result.output


def test_split_command_with_step_and_exception():
    """Rolling slots should skip the excepted interval like plain splits do."""
    result = runner.invoke(
        app,
        [
            "split", "09:00:00", "12:00:00",
            "--slot", "30", "--step", "15",
            "--except", "10:00:00-11:00:00",
        ],
    )

    assert result.exit_code == 0
    assert "09:00:00 │ 09:30:00" in result.output
    assert "09:30:00 │ 10:00:00" in result.output
    assert "11:00:00 │ 11:30:00" in result.output
    assert "09:45:00 │ 10:15:00" not in result.output
    assert "10:30:00 │ 11:00:00" not in result.output


def test_split_command_unknown_timezone():
    """An unknown timezone should be reported as such, not as a layout error."""
    result = runner.invoke(app, ["split", "08:30:00", "17:00:00", "--tz", "Not/AZone"])

    assert result.exit_code == 1
    assert "Unknown timezone" in result.output
    assert "HH:MM:SS" not in result.output


def test_split_command_rejects_bad_time():
    """A malformed time should exit with an error."""
    result = runner.invoke(app, ["split", "8:30", "17:00:00"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_free_command():
    """Free gaps around occupied intervals should be listed."""
    result = runner.invoke(
        app,
        ["free", "08:30:00", "17:00:00", "-b", "09:00:00-11:30:00", "-b", "14:00:00-14:30:00"],
    )

    assert result.exit_code == 0
    assert "08:30:00" in result.output
    assert "11:30:00" in result.output
    assert "14:30:00" in result.output


def test_overlap_command():
    """Back-to-back intervals should be reported as not overlapping."""
    result = runner.invoke(app, ["overlap", "09:00:00", "11:00:00", "11:00:00", "13:00:00"])

    assert result.exit_code == 0
    assert "no overlap" in result.output


def test_now_command():
    """The current time should be printed with its timezone."""
    result = runner.invoke(app, ["now", "--tz", "Europe/Copenhagen"])

    assert result.exit_code == 0
    assert "Europe/Copenhagen" in result.output


def test_slots_command(tmp_path):
    """Slots should be computed from the configured window and schedule."""
    (tmp_path / "busy.json").write_text(
        json.dumps([{"from": "09:00:00", "to": "11:30:00"}]),
        encoding="utf-8",
    )
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "defaults:\n"
        "  slot_minutes: 120\n"
        "  window_start: \"08:30:00\"\n"
        "  window_end: \"17:00:00\"\n"
        "schedule_file: busy.json\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["slots", "--config", str(config_path)])

    assert result.exit_code == 0
    assert "2 bookable slot(s)" in result.output
    assert "15:30:00" in result.output


def test_slots_command_missing_config(tmp_path):
    """A missing config file should exit with an error."""
    result = runner.invoke(app, ["slots", "--config", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_version_command():
    """The version should be printed."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
