"""Tests for the jobs CLI commands."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from rich.console import Console
from typer.testing import CliRunner

from cadence.cli.jobs_commands import app
from cadence.jobs.store import SystemSettingsStore

runner = CliRunner()


@pytest.fixture(autouse=True)
def patch_store(store: SystemSettingsStore):
    """Patch _get_store to use our tmp_path store and render wide tables."""
    wide = Console(width=200)
    with (
        patch("cadence.cli.jobs_commands._get_store", return_value=store),
        patch("cadence.cli.jobs_commands.console", wide),
        patch("cadence.cli.cron_commands.console", wide),
    ):
        yield


def test_show_defaults():
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "cron_auto_generate" in result.output
    assert "cron_auto_publish" in result.output
    assert "0 9 * * *" in result.output
    assert "Every day at 10:00" in result.output
    assert "round_robin" in result.output


def test_show_disabled_job(store: SystemSettingsStore):
    store.set_enabled("cron_auto_publish", False)
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "disabled" in result.output


def test_set_schedule(store: SystemSettingsStore):
    result = runner.invoke(app, ["set-schedule", "cron_auto_publish", "0 10 * * 1-5"])
    assert result.exit_code == 0
    assert "cron_auto_publish" in result.output
    assert "weekdays only" in result.output
    assert store.get().cron_auto_publish.schedule == "0 10 * * 1-5"


def test_set_schedule_invalid_cron(store: SystemSettingsStore):
    result = runner.invoke(app, ["set-schedule", "cron_auto_generate", "not valid"])
    assert result.exit_code == 1
    assert "Invalid cron" in result.output
    assert store.get().cron_auto_generate.schedule == "0 9 * * *"


def test_set_schedule_unknown_job():
    result = runner.invoke(app, ["set-schedule", "author_assignment", "0 9 * * *"])
    assert result.exit_code == 1
    assert "Unknown job" in result.output


def test_disable_and_enable(store: SystemSettingsStore):
    result = runner.invoke(app, ["disable", "cron_auto_generate"])
    assert result.exit_code == 0
    assert "Disabled" in result.output
    assert store.get().cron_auto_generate.enabled is False

    result = runner.invoke(app, ["enable", "cron_auto_generate"])
    assert result.exit_code == 0
    assert "Enabled" in result.output
    assert store.get().cron_auto_generate.enabled is True


def test_enable_already_enabled():
    result = runner.invoke(app, ["enable", "cron_auto_publish"])
    assert result.exit_code == 0
    assert "already enabled" in result.output


def test_disable_unknown_job():
    result = runner.invoke(app, ["disable", "nope"])
    assert result.exit_code == 1
    assert "Unknown job" in result.output


def test_preview(store: SystemSettingsStore):
    result = runner.invoke(app, ["preview", "cron_auto_generate", "--count", "2"])
    assert result.exit_code == 0
    assert result.output.count("09:00") == 2


def test_preview_disabled_job(store: SystemSettingsStore):
    store.set_enabled("cron_auto_publish", False)
    result = runner.invoke(app, ["preview", "cron_auto_publish"])
    assert result.exit_code == 0
    assert "disabled" in result.output
