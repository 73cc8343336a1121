"""Job settings subsystem: persisted cron job configuration."""

from cadence.jobs.models import SCHEDULED_KEYS, SystemSettings
from cadence.jobs.store import SystemSettingsStore

__all__ = ["SCHEDULED_KEYS", "SystemSettings", "SystemSettingsStore"]
