"""Pydantic models for configuration sub-sections."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from cadence.config.constants import DEFAULT_LOCALE, DEFAULT_PREVIEW_COUNT, SUPPORTED_LOCALES


class DisplayConfig(BaseModel):
    """How schedules are rendered for people."""

    locale: str = DEFAULT_LOCALE  # en | ko
    preview_count: int = Field(default=DEFAULT_PREVIEW_COUNT, ge=1, le=50)

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale {value!r} (expected one of {SUPPORTED_LOCALES})")
        return value


class LoggingConfig(BaseModel):
    """Log verbosity for the CLI."""

    level: str = "WARNING"  # DEBUG | INFO | WARNING | ERROR

    @field_validator("level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()
