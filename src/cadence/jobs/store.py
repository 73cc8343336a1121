"""JSON file persistence for job settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from croniter import croniter
from pydantic import ValidationError

from cadence.config.constants import (
    DAY_OF_MONTH_RANGE,
    DAY_OF_WEEK_RANGE,
    HOUR_RANGE,
    MINUTE_RANGE,
    MONTH_RANGE,
    SYSTEM_SETTINGS_FILE,
)
from cadence.jobs.models import SCHEDULED_KEYS, SETTINGS_MODELS, SystemSettings
from cadence.schedule.simulate import expand_field

logger = logging.getLogger("cadence.jobs.store")

_FIELD_RANGES = (MINUTE_RANGE, HOUR_RANGE, DAY_OF_MONTH_RANGE, MONTH_RANGE, DAY_OF_WEEK_RANGE)


class SystemSettingsStore:
    """Load/save job settings from a JSON object of ``{key: value}``.

    Each stored value is merged over its group's defaults, so a file written
    by an older version only needs the keys it knows about. Uses atomic
    writes (write to .tmp, then replace) to prevent corruption.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or SYSTEM_SETTINGS_FILE
        self._settings = SystemSettings()
        self.load()

    # -- Persistence -----------------------------------------------------------

    def load(self) -> None:
        """Load settings from disk. Silently falls back to defaults if missing."""
        self._settings = SystemSettings()
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Failed to load job settings: %s", exc)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring job settings file %s: expected an object", self._path)
            return

        for key, value in data.items():
            if key not in SETTINGS_MODELS or not isinstance(value, dict):
                logger.debug("Skipping unknown settings key %r", key)
                continue
            try:
                self._settings = self._merged(key, value)
            except ValidationError as exc:
                logger.warning("Invalid stored value for %s, using defaults: %s", key, exc)
        logger.debug("Loaded job settings from %s", self._path)

    def save(self) -> None:
        """Persist all settings to disk atomically."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        data = self._settings.model_dump(mode="json")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp.replace(self._path)

    # -- Access ----------------------------------------------------------------

    def get(self) -> SystemSettings:
        """Return the current settings."""
        return self._settings

    def put(self, key: str, value: dict[str, Any]) -> SystemSettings:
        """Merge *value* into the group stored under *key*, validate, and persist."""
        if key not in SETTINGS_MODELS:
            raise ValueError(f"Unknown settings key: {key}")
        if "schedule" in value:
            self._check_schedule(value["schedule"])
        self._settings = self._merged(key, value)
        self.save()
        logger.info("Updated settings %s", key)
        return self._settings

    def set_schedule(self, key: str, expression: str) -> SystemSettings:
        """Replace a scheduled job's cron expression."""
        if key not in SCHEDULED_KEYS:
            raise ValueError(f"Settings key {key!r} has no schedule")
        return self.put(key, {"schedule": expression.strip()})

    def set_enabled(self, key: str, enabled: bool) -> SystemSettings:
        """Enable or disable a scheduled job."""
        if key not in SCHEDULED_KEYS:
            raise ValueError(f"Settings key {key!r} has no schedule")
        return self.put(key, {"enabled": enabled})

    # -- Internal helpers ------------------------------------------------------

    def _merged(self, key: str, value: dict[str, Any]) -> SystemSettings:
        model = SETTINGS_MODELS[key]
        current = self._settings.group(key).model_dump(mode="json")
        group = model.model_validate({**current, **value})
        return self._settings.model_copy(update={key: group})

    @staticmethod
    def _check_schedule(expression: Any) -> None:
        if not isinstance(expression, str) or len(expression.split()) != 5:
            raise ValueError(f"Invalid cron expression: {expression}")
        if not croniter.is_valid(expression):
            raise ValueError(f"Invalid cron expression: {expression}")
        # Only numeric fields (*, N, a-b, lists, steps) are readable by the run preview
        for field, bounds in zip(expression.split(), _FIELD_RANGES):
            if not expand_field(field, *bounds):
                raise ValueError(
                    f"Invalid cron expression: {expression} (unsupported field {field!r})"
                )
