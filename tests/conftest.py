"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from cadence.config.settings import Settings, get_settings
from cadence.jobs.store import SystemSettingsStore


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Keep tests away from ~/.cadence/config.json and the cached settings."""
    monkeypatch.setattr("cadence.config.settings.CONFIG_FILE", tmp_path / "config.json")
    get_settings.cache_clear()
    yield tmp_path / "config.json"
    get_settings.cache_clear()


@pytest.fixture
def now() -> datetime:
    """A fixed reference clock: Thursday 2026-10-15 15:00."""
    return datetime(2026, 10, 15, 15, 0)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing the job store at a temporary file."""
    return Settings(settings_file=str(tmp_path / "system_settings.json"))


@pytest.fixture
def store(tmp_path: Path) -> SystemSettingsStore:
    return SystemSettingsStore(path=tmp_path / "system_settings.json")
