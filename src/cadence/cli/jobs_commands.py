"""CLI commands for stored job settings."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cadence.cli.cron_commands import print_runs

app = typer.Typer(
    name="jobs",
    help="Manage the schedules of the content jobs.",
    no_args_is_help=True,
)
console = Console()


def _get_store(path=None):
    """Create a SystemSettingsStore at the configured path."""
    from cadence.config.settings import get_settings
    from cadence.jobs.store import SystemSettingsStore

    return SystemSettingsStore(path=path or get_settings().settings_path)


def _get_settings():
    from cadence.config.settings import get_settings

    return get_settings()


def _require_scheduled(key: str) -> None:
    from cadence.jobs.models import SCHEDULED_KEYS

    if key not in SCHEDULED_KEYS:
        console.print(f"[red]Unknown job '{key}'.[/red]")
        console.print(f"[dim]Known jobs: {', '.join(SCHEDULED_KEYS)}[/dim]")
        raise typer.Exit(1)


@app.command("show")
def show_jobs():
    """List scheduled jobs with their schedule and next run."""
    from cadence.jobs.models import SCHEDULED_KEYS
    from cadence.schedule.describe import format_run, get_runs_info, get_schedule_description
    from cadence.schedule.simulate import get_next_scheduled_runs

    locale = _get_settings().display.locale
    settings = _get_store().get()

    table = Table(title="Scheduled Jobs", show_lines=False)
    table.add_column("Job", style="bold")
    table.add_column("Status")
    table.add_column("Schedule")
    table.add_column("Description")
    table.add_column("Frequency", style="dim")
    table.add_column("Next run")

    for key in SCHEDULED_KEYS:
        group = settings.group(key)
        config = settings.schedule_config(key)
        status = "[green]enabled[/green]" if group.enabled else "[yellow]disabled[/yellow]"
        runs = get_next_scheduled_runs(group.schedule, 1) if group.enabled else []
        table.add_row(
            key,
            status,
            group.schedule,
            get_schedule_description(config, locale),
            get_runs_info(config, locale),
            format_run(runs[0], locale) if runs else "-",
        )

    console.print(table)
    assignment = settings.author_assignment
    console.print(
        f"\n  [dim]Author assignment: {assignment.algorithm.value}"
        f" (specialty match: {'on' if assignment.prefer_specialty_match else 'off'},"
        f" fallback: {'on' if assignment.fallback_to_any else 'off'})[/dim]\n"
    )


@app.command("set-schedule")
def set_schedule(
    key: str = typer.Argument(help="Job key (cron_auto_generate or cron_auto_publish)"),
    expression: str = typer.Argument(help="5-field cron expression (e.g. '0 9 * * 1-5')"),
):
    """Store a new cron schedule for a job."""
    from cadence.schedule.describe import get_schedule_description
    from cadence.schedule.expression import parse_cron_expression

    _require_scheduled(key)
    store = _get_store()
    try:
        store.set_schedule(key, expression)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        console.print("[dim]Use standard 5-field format: minute hour day month weekday[/dim]")
        raise typer.Exit(1)

    description = get_schedule_description(
        parse_cron_expression(expression), _get_settings().display.locale
    )
    console.print(f"  [green]\u2713[/green] [bold]{key}[/bold] now runs on {expression.strip()}")
    console.print(f"  [dim]{description}[/dim]")


def _set_enabled(key: str, enabled: bool) -> None:
    _require_scheduled(key)
    store = _get_store()
    group = store.get().group(key)
    word = "enabled" if enabled else "disabled"

    if group.enabled == enabled:
        console.print(f"[dim]Job '{key}' is already {word}.[/dim]")
        raise typer.Exit()

    store.set_enabled(key, enabled)
    console.print(f"  [green]\u2713[/green] {word.capitalize()} [bold]{key}[/bold].")


@app.command("enable")
def enable_job(
    key: str = typer.Argument(help="Job key to enable"),
):
    """Enable a scheduled job."""
    _set_enabled(key, True)


@app.command("disable")
def disable_job(
    key: str = typer.Argument(help="Job key to disable"),
):
    """Disable a scheduled job without losing its schedule."""
    _set_enabled(key, False)


@app.command("preview")
def preview_job(
    key: str = typer.Argument(help="Job key to preview"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, help="How many runs to show"),
):
    """Preview the next runs of a job's stored schedule."""
    _require_scheduled(key)
    settings = _get_settings()
    group = _get_store().get().group(key)

    if not group.enabled:
        console.print(f"[yellow]Job '{key}' is disabled; it will not run.[/yellow]")
    print_runs(group.schedule, count or settings.display.preview_count, settings.display.locale)
