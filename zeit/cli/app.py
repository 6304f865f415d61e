"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import List, Optional, Annotated, Sequence

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from ..adapters.json_schedule_source import JsonScheduleSource
from ..adapters.static_schedule_source import StaticScheduleSource
from ..config import AppConfig, get_default_config_path
from ..domain.algebra import drop_overlapping, overlapping, split_filter, split_offset
from ..domain.exceptions import LayoutError, ZeitError
from ..domain.models import DEFAULT_TIMEZONE, TimeInterval, TimeOfDay
from ..services.slot_planner import SlotPlanner

app = typer.Typer(
    name="zeit",
    help="Work with times of day and the intervals between them",
    add_completion=False
)

console = Console()


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Time-of-day intervals: split, exclude and overlap.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )


def _parse_interval_option(text: str, tz: str) -> TimeInterval:
    """
    Parse an interval given as "HH:MM:SS-HH:MM:SS".
    """
    start, separator, end = text.partition("-")
    if not separator:
        raise LayoutError(
            f'interval must be formatted as "HH:MM:SS-HH:MM:SS", got {text!r}'
        )

    return TimeInterval.parse_pair_in(start.strip(), end.strip(), tz)


def _print_intervals(title: str, intervals: Sequence[TimeInterval]) -> None:
    """Render intervals as a table."""
    if not intervals:
        console.print(f"[yellow]⚠ {title}: none[/yellow]")
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", style="dim")
    table.add_column("From", style="bold yellow")
    table.add_column("To", style="bold yellow")
    table.add_column("Minutes", justify="right")

    for idx, interval in enumerate(intervals, 1):
        table.add_row(
            str(idx),
            interval.start.to_text(),
            interval.end.to_text(),
            f"{interval.duration().total_seconds() / 60:g}"
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def now(
    tz: Annotated[str, typer.Option("--tz", help="Timezone, e.g. Europe/Copenhagen")] = DEFAULT_TIMEZONE,
):
    """
    Show the current time of day.
    """
    try:
        current = TimeOfDay.now_in(tz)
    except (KeyError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] Unknown timezone '{tz}': {e}")
        raise typer.Exit(1)

    console.print(f"{current.to_text()} [dim]({current.location})[/dim]")


@app.command()
def split(
    start: Annotated[str, typer.Argument(help="Window start (HH:MM:SS)")],
    end: Annotated[str, typer.Argument(help="Window end (HH:MM:SS)")],
    slot: Annotated[int, typer.Option("--slot", "-s", help="Slot length in minutes")] = 30,
    step: Annotated[Optional[int], typer.Option("--step", help="Start a slot every N minutes")] = None,
    except_: Annotated[Optional[List[str]], typer.Option("--except", "-e", help="Interval to avoid (HH:MM:SS-HH:MM:SS)")] = None,
    tz: Annotated[str, typer.Option("--tz", help="Timezone of the given times")] = DEFAULT_TIMEZONE,
):
    """
    Split a window into slots.

    Examples:

        zeit split 08:30:00 17:00:00 --slot 120

        zeit split 09:00:00 12:00:00 --slot 30 --step 15

        zeit split 09:00:00 17:00:00 --slot 60 --except 12:00:00-13:00:00
    """
    try:
        window = TimeInterval.parse_pair_in(start, end, tz)
        slot_duration = pendulum.duration(minutes=slot)
        exceptions = [_parse_interval_option(item, tz) for item in except_ or []]

        if step is None:
            slots = split_filter(window, slot_duration, exceptions)
        else:
            slots = drop_overlapping(
                split_offset(window, pendulum.duration(minutes=step), slot_duration),
                exceptions,
            )
    except ZeitError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    except (KeyError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] Unknown timezone '{tz}': {e}")
        raise typer.Exit(1)

    _print_intervals(f"Slots in {window}", slots)


@app.command()
def free(
    start: Annotated[str, typer.Argument(help="Window start (HH:MM:SS)")],
    end: Annotated[str, typer.Argument(help="Window end (HH:MM:SS)")],
    busy: Annotated[Optional[List[str]], typer.Option("--busy", "-b", help="Occupied interval (HH:MM:SS-HH:MM:SS)")] = None,
    tz: Annotated[str, typer.Option("--tz", help="Timezone of the given times")] = DEFAULT_TIMEZONE,
):
    """
    List the free gaps of a window.

    Example:

        zeit free 08:30:00 17:00:00 -b 09:00:00-11:30:00 -b 14:00:00-14:30:00
    """
    try:
        window = TimeInterval.parse_pair_in(start, end, tz)
        occupied = [_parse_interval_option(item, tz) for item in busy or []]

        planner = SlotPlanner(schedule_source=StaticScheduleSource(occupied))
        gaps = planner.free_intervals(
            window=window,
            occupied=planner.fetch_occupied(window=window),
        )
    except ZeitError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    except (KeyError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] Unknown timezone '{tz}': {e}")
        raise typer.Exit(1)

    _print_intervals(f"Free in {window}", gaps)


@app.command()
def slots(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    schedule: Annotated[Optional[Path], typer.Option("--schedule", help="JSON schedule file, overrides the config")] = None,
    slot: Annotated[Optional[int], typer.Option("--slot", "-s", help="Slot length in minutes")] = None,
    step: Annotated[Optional[int], typer.Option("--step", help="Start a slot every N minutes")] = None,
):
    """
    Find bookable slots in the configured window around a JSON schedule.

    Example:

        zeit slots --config config.yaml --schedule busy.json --slot 60
    """
    try:
        config_path = config_file or get_default_config_path()
        config = AppConfig.load_from_yaml(config_path)

        schedule_file = schedule or config.schedule_file
        if schedule_file is None:
            console.print("[bold red]Error:[/bold red] No schedule file configured. Use --schedule.")
            raise typer.Exit(1)

        window = config.get_window()
        slot_duration = (
            pendulum.duration(minutes=slot) if slot is not None
            else config.defaults.slot_duration()
        )
        step_duration = (
            pendulum.duration(minutes=step) if step is not None
            else config.defaults.step_duration()
        )

        planner = SlotPlanner(
            schedule_source=JsonScheduleSource(schedule_file, tz=config.timezone)
        )
        found = planner.find_slots(
            window=window,
            slot=slot_duration,
            step=step_duration,
        )
    except FileNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    except (ZeitError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(f"[bold cyan]Window:[/bold cyan] {window} ({config.timezone})")
    _print_intervals(f"{len(found)} bookable slot(s)", found)


@app.command()
def overlap(
    a_start: Annotated[str, typer.Argument(help="First interval start")],
    a_end: Annotated[str, typer.Argument(help="First interval end")],
    b_start: Annotated[str, typer.Argument(help="Second interval start")],
    b_end: Annotated[str, typer.Argument(help="Second interval end")],
):
    """
    Check whether two intervals overlap.
    """
    try:
        first = TimeInterval.parse_pair(a_start, a_end)
        second = TimeInterval.parse_pair(b_start, b_end)
    except ZeitError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if overlapping(first, second):
        console.print(f"[bold]{first}[/bold] and [bold]{second}[/bold]: [red]overlap[/red]")
    else:
        console.print(f"[bold]{first}[/bold] and [bold]{second}[/bold]: [green]no overlap[/green]")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]zeit[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
