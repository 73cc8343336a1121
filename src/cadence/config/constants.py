"""Paths and default values used across the project."""

from pathlib import Path

# Base directory for all cadence data
CADENCE_HOME = Path.home() / ".cadence"

CONFIG_FILE = CADENCE_HOME / "config.json"
SYSTEM_SETTINGS_FILE = CADENCE_HOME / "system_settings.json"

# Schedule defaults
DEFAULT_CRON_EXPRESSION = "0 9 * * *"  # 09:00 daily
DEFAULT_AUTO_PUBLISH_CRON = "0 10 * * *"
DEFAULT_PREVIEW_COUNT = 5

# Hard cap for the forward simulation: one non-leap year of minutes
MAX_SIMULATION_MINUTES = 525_600

# Field bounds: (minimum, maximum) in cron field order
MINUTE_RANGE = (0, 59)
HOUR_RANGE = (0, 23)
DAY_OF_MONTH_RANGE = (1, 31)
MONTH_RANGE = (1, 12)
DAY_OF_WEEK_RANGE = (0, 6)  # Sunday = 0

WEEKDAYS = (1, 2, 3, 4, 5)
WEEKENDS = (0, 6)

# Display locales supported by the description helpers
SUPPORTED_LOCALES = ("en", "ko")
DEFAULT_LOCALE = "en"
