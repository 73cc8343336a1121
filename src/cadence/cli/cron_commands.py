"""CLI commands for building and inspecting cron expressions."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cadence.schedule.models import DayRestriction, IntervalUnit

app = typer.Typer(
    name="cron",
    help="Build, parse, describe and preview cron expressions.",
    no_args_is_help=True,
)
console = Console()


def _get_settings():
    from cadence.config.settings import get_settings

    return get_settings()


def _parse_time(value: str) -> tuple[int, int]:
    """Parse ``HH:MM`` into (hour, minute), exiting on bad input."""
    hour_text, sep, minute_text = value.partition(":")
    try:
        hour, minute = int(hour_text), int(minute_text)
    except ValueError:
        hour = minute = -1
    if not sep or not (0 <= hour <= 23 and 0 <= minute <= 59):
        console.print(f"[red]Invalid time: {value}[/red]")
        console.print("[dim]Use 24-hour HH:MM, e.g. 09:00 or 14:30[/dim]")
        raise typer.Exit(1)
    return hour, minute


def print_runs(expression: str, count: int, locale: str) -> None:
    """Print a table of upcoming runs (shared with the jobs commands)."""
    from cadence.schedule.describe import format_run
    from cadence.schedule.simulate import get_next_scheduled_runs

    runs = get_next_scheduled_runs(expression, count)
    if not runs:
        console.print(f"[yellow]No upcoming runs found for '{expression}'.[/yellow]")
        return

    table = Table(title=f"Next runs: {expression}", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Run")
    for idx, run in enumerate(runs, start=1):
        table.add_row(str(idx), format_run(run, locale))
    console.print(table)


@app.command("generate")
def generate(
    unit: IntervalUnit = typer.Option(IntervalUnit.DAYS, "--unit", "-u", help="Interval unit"),
    every: int = typer.Option(1, "--every", "-e", min=1, help="Interval value"),
    at: str = typer.Option("09:00", "--at", help="Time of day (HH:MM)"),
    days: DayRestriction = typer.Option(DayRestriction.ALL, "--days", "-d", help="Day restriction"),
    day: Optional[list[int]] = typer.Option(None, "--day", help="Day of week 0-6 (Sun=0), repeatable"),
    dom: Optional[list[int]] = typer.Option(None, "--dom", help="Day of month 1-31, repeatable"),
    month: Optional[list[int]] = typer.Option(None, "--month", "-m", help="Month 1-12, repeatable"),
):
    """Build a cron expression from a structured schedule."""
    from cadence.schedule.describe import get_schedule_description
    from cadence.schedule.expression import generate_cron_expression
    from cadence.schedule.models import ScheduleConfig

    hour, minute = _parse_time(at)
    changes: dict = {
        "interval_unit": unit,
        "interval_value": every,
        "hour": hour,
        "minute": minute,
        "day_restriction": days,
        "days_of_month": tuple(dom or ()),
        "selected_months": tuple(month or ()),
    }
    if day:
        changes["day_restriction"] = DayRestriction.CUSTOM
        changes["selected_days"] = tuple(day)

    # Taken as typed; the editor's interval bounds do not apply here
    config = ScheduleConfig(**changes)
    expression = generate_cron_expression(config)

    console.print(f"  [bold]{expression}[/bold]")
    console.print(f"  [dim]{get_schedule_description(config, _get_settings().display.locale)}[/dim]")


@app.command("parse")
def parse(
    expression: str = typer.Argument(help="5-field cron expression (e.g. '30 14 * * 1-5')"),
):
    """Show the structured schedule a cron expression maps to."""
    from cadence.schedule.describe import get_schedule_description
    from cadence.schedule.expression import parse_cron_expression

    config = parse_cron_expression(expression)
    if len(expression.split()) != 5:
        console.print(f"[yellow]Not a 5-field expression: '{expression}'. Showing the default schedule.[/yellow]")

    table = Table(title="Schedule", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Interval", f"{config.interval_value} {config.interval_unit.value}")
    table.add_row("Time", f"{config.hour:02d}:{config.minute:02d}")
    table.add_row("Days", config.day_restriction.value)
    table.add_row("Selected days", ", ".join(map(str, config.selected_days)) or "-")
    table.add_row("Days of month", ", ".join(map(str, config.days_of_month)) or "-")
    table.add_row("Months", ", ".join(map(str, config.selected_months)) or "-")
    console.print(table)
    console.print(f"  [dim]{get_schedule_description(config, _get_settings().display.locale)}[/dim]")


@app.command("describe")
def describe(
    expression: str = typer.Argument(help="5-field cron expression"),
):
    """Describe a cron expression in words."""
    from cadence.schedule.describe import get_runs_info, get_schedule_description
    from cadence.schedule.expression import parse_cron_expression

    locale = _get_settings().display.locale
    config = parse_cron_expression(expression)
    console.print(get_schedule_description(config, locale))
    console.print(f"[dim]{get_runs_info(config, locale)}[/dim]")


@app.command("next")
def next_runs(
    expression: str = typer.Argument(help="5-field cron expression"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, help="How many runs to show"),
):
    """Preview the next runs of a cron expression (host-local time)."""
    settings = _get_settings()
    print_runs(expression, count or settings.display.preview_count, settings.display.locale)
