"""Tests for SystemSettingsStore JSON persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from cadence.jobs.models import AssignmentAlgorithm
from cadence.jobs.store import SystemSettingsStore


def test_missing_file_gives_defaults(store: SystemSettingsStore):
    """A new store with no file should hold the default settings."""
    settings = store.get()
    assert settings.cron_auto_generate.schedule == "0 9 * * *"
    assert settings.cron_auto_publish.schedule == "0 10 * * *"


def test_put_persists_to_disk(store: SystemSettingsStore):
    store.put("cron_auto_generate", {"batch_size": 7})
    data = json.loads(store._path.read_text(encoding="utf-8"))
    assert data["cron_auto_generate"]["batch_size"] == 7
    assert data["cron_auto_generate"]["schedule"] == "0 9 * * *"


def test_load_from_disk(tmp_path: Path):
    """A new store should pick up settings from an existing file."""
    path = tmp_path / "system_settings.json"
    SystemSettingsStore(path=path).set_schedule("cron_auto_publish", "0 11 * * 1-5")

    reloaded = SystemSettingsStore(path=path)
    assert reloaded.get().cron_auto_publish.schedule == "0 11 * * 1-5"


def test_partial_file_merges_over_defaults(tmp_path: Path):
    path = tmp_path / "system_settings.json"
    path.write_text(json.dumps({"cron_auto_generate": {"batch_size": 5}}), encoding="utf-8")
    settings = SystemSettingsStore(path=path).get()
    assert settings.cron_auto_generate.batch_size == 5
    assert settings.cron_auto_generate.schedule == "0 9 * * *"
    assert settings.author_assignment.algorithm == AssignmentAlgorithm.ROUND_ROBIN


def test_unknown_keys_are_ignored(tmp_path: Path):
    path = tmp_path / "system_settings.json"
    path.write_text(json.dumps({"gsc_collect": {"enabled": False}}), encoding="utf-8")
    settings = SystemSettingsStore(path=path).get()
    assert not hasattr(settings, "gsc_collect")


def test_invalid_stored_group_falls_back(tmp_path: Path):
    path = tmp_path / "system_settings.json"
    path.write_text(
        json.dumps({
            "cron_auto_generate": {"batch_size": 99},
            "cron_auto_publish": {"max_publish_per_run": 20},
        }),
        encoding="utf-8",
    )
    settings = SystemSettingsStore(path=path).get()
    assert settings.cron_auto_generate.batch_size == 3
    assert settings.cron_auto_publish.max_publish_per_run == 20


@pytest.mark.parametrize("content", ["NOT VALID JSON{{{", "[1, 2, 3]"])
def test_corrupted_file(tmp_path: Path, content: str):
    """Store should handle an unreadable file gracefully."""
    path = tmp_path / "system_settings.json"
    path.write_text(content, encoding="utf-8")
    settings = SystemSettingsStore(path=path).get()
    assert settings.cron_auto_generate.schedule == "0 9 * * *"


def test_set_schedule(store: SystemSettingsStore):
    settings = store.set_schedule("cron_auto_generate", "  */30 * * * *  ")
    assert settings.cron_auto_generate.schedule == "*/30 * * * *"
    assert store.get().cron_auto_generate.schedule == "*/30 * * * *"


@pytest.mark.parametrize("expression", ["not a cron", "61 9 * * *", "0 9 * * * *", ""])
def test_set_schedule_rejects_invalid_cron(store: SystemSettingsStore, expression: str):
    with pytest.raises(ValueError, match="Invalid cron expression"):
        store.set_schedule("cron_auto_generate", expression)
    assert store.get().cron_auto_generate.schedule == "0 9 * * *"


@pytest.mark.parametrize("expression", ["0 9 * * MON", "0 9 * JAN *", "0 9 * * 7"])
def test_set_schedule_rejects_fields_runs_cannot_read(store: SystemSettingsStore, expression: str):
    with pytest.raises(ValueError, match="unsupported field"):
        store.set_schedule("cron_auto_publish", expression)
    assert store.get().cron_auto_publish.schedule == "0 10 * * *"


def test_set_schedule_accepts_ranges_lists_and_steps(store: SystemSettingsStore):
    store.set_schedule("cron_auto_publish", "0,30 9-17 */2 1-6 1,3,5")
    assert store.get().cron_auto_publish.schedule == "0,30 9-17 */2 1-6 1,3,5"


def test_set_schedule_requires_scheduled_key(store: SystemSettingsStore):
    with pytest.raises(ValueError, match="has no schedule"):
        store.set_schedule("author_assignment", "0 9 * * *")


def test_put_unknown_key(store: SystemSettingsStore):
    with pytest.raises(ValueError, match="Unknown settings key"):
        store.put("nope", {"enabled": True})


def test_put_invalid_value(store: SystemSettingsStore):
    with pytest.raises(ValidationError):
        store.put("cron_auto_publish", {"max_publish_per_run": 0})


def test_set_enabled(store: SystemSettingsStore):
    store.set_enabled("cron_auto_publish", False)
    reloaded = SystemSettingsStore(path=store._path)
    assert reloaded.get().cron_auto_publish.enabled is False
    assert reloaded.get().cron_auto_generate.enabled is True


def test_put_author_assignment(store: SystemSettingsStore):
    store.put("author_assignment", {"algorithm": "specialty_first"})
    assert store.get().author_assignment.algorithm == AssignmentAlgorithm.SPECIALTY_FIRST


def test_atomic_write(store: SystemSettingsStore):
    """No .tmp file should remain after save."""
    store.put("cron_auto_generate", {"enabled": False})
    assert not store._path.with_suffix(".tmp").exists()
