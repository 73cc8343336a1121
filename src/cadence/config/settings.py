"""Central settings: loads from ~/.cadence/config.json + environment variables."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cadence.config.constants import CADENCE_HOME, CONFIG_FILE, SYSTEM_SETTINGS_FILE
from cadence.config.models import DisplayConfig, LoggingConfig

logger = logging.getLogger("cadence.config.settings")


class Settings(BaseSettings):
    """All cadence configuration in one place.

    Priority (highest → lowest):
      1. Environment variables (CADENCE_ prefix, ``__`` for nesting)
      2. .env file
      3. ~/.cadence/config.json
      4. Defaults defined here
    """

    model_config = SettingsConfigDict(
        env_prefix="CADENCE_",
        env_nested_delimiter="__",
        env_file=(".env", str(CADENCE_HOME / ".env")),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Sub-configs ---
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    log: LoggingConfig = Field(default_factory=LoggingConfig)

    # --- Top-level settings ---
    settings_file: str = str(SYSTEM_SETTINGS_FILE)  # job settings JSON

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values: dict) -> dict:
        """Merge config.json values as defaults (explicit values still override)."""
        if CONFIG_FILE.exists():
            try:
                file_data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
                merged = {**file_data, **{k: v for k, v in values.items() if v is not None}}
                values = merged
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Ignoring unreadable %s: %s", CONFIG_FILE, exc)
        return values

    @property
    def settings_path(self) -> Path:
        """Resolved job settings file."""
        return Path(self.settings_file).expanduser()

    def save(self) -> None:
        """Persist current settings to config.json."""
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json")
        CONFIG_FILE.write_text(json.dumps(data, indent=2), encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
