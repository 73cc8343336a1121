"""Cadence CLI: the main entry point."""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from cadence import __version__
from cadence.cli.cron_commands import app as cron_app
from cadence.cli.jobs_commands import app as jobs_app

app = typer.Typer(
    name="cadence",
    help="Build, preview and store cron schedules for content jobs.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
app.add_typer(cron_app, name="cron")
app.add_typer(jobs_app, name="jobs")
console = Console()


@app.callback(invoke_without_command=True)
def main_callback(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output"),
):
    if version:
        console.print(f"cadence [dim]v{__version__}[/dim]")
        raise typer.Exit()

    from cadence.config.settings import get_settings

    level = "DEBUG" if verbose else get_settings().log.level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    app()
