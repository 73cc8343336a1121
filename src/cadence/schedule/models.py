"""Pydantic models for the structured schedule description."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from cadence.config.constants import (
    DAY_OF_MONTH_RANGE,
    DAY_OF_WEEK_RANGE,
    HOUR_RANGE,
    MINUTE_RANGE,
    MONTH_RANGE,
    WEEKDAYS,
    WEEKENDS,
)


class IntervalUnit(str, Enum):
    """Magnitude of the repeat interval."""

    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    MONTHS = "months"


class DayRestriction(str, Enum):
    """Which days of the week a run may land on."""

    ALL = "all"
    WEEKDAYS = "weekdays"
    WEEKENDS = "weekends"
    CUSTOM = "custom"


class UnitOption(NamedTuple):
    """Bounds the editor allows for an interval value."""

    min_value: int
    max_value: int
    step: int


UNIT_OPTIONS: dict[IntervalUnit, UnitOption] = {
    IntervalUnit.MINUTES: UnitOption(15, 45, 15),  # 15, 30, 45
    IntervalUnit.HOURS: UnitOption(1, 23, 1),
    IntervalUnit.DAYS: UnitOption(1, 31, 1),
    IntervalUnit.MONTHS: UnitOption(1, 12, 1),
}

DAY_RESTRICTION_PRESETS: dict[DayRestriction, tuple[int, ...]] = {
    DayRestriction.ALL: (),
    DayRestriction.WEEKDAYS: WEEKDAYS,
    DayRestriction.WEEKENDS: WEEKENDS,
    DayRestriction.CUSTOM: (),
}


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


def _members(values, bounds: tuple[int, int]) -> tuple[int, ...]:
    low, high = bounds
    return tuple(sorted({int(v) for v in values if low <= int(v) <= high}))


class ScheduleConfig(BaseModel):
    """A human-editable recurrence, mapped to and from a 5-field cron expression.

    Instances are immutable; edit them through :mod:`cadence.schedule.reducer`.
    Integer fields are clamped into range and set members outside their range
    are dropped, so building a config from integers never fails.
    Empty ``days_of_month`` / ``selected_months`` mean "unrestricted".
    """

    model_config = ConfigDict(frozen=True)

    interval_value: int = 1
    interval_unit: IntervalUnit = IntervalUnit.DAYS
    hour: int = 9
    minute: int = 0
    day_restriction: DayRestriction = DayRestriction.ALL
    selected_days: tuple[int, ...] = ()  # 0-6, Sunday = 0
    days_of_month: tuple[int, ...] = ()  # 1-31
    selected_months: tuple[int, ...] = ()  # 1-12

    @field_validator("interval_value")
    @classmethod
    def _positive_interval(cls, value: int) -> int:
        return max(1, value)

    @field_validator("hour")
    @classmethod
    def _clamp_hour(cls, value: int) -> int:
        return _clamp(value, HOUR_RANGE)

    @field_validator("minute")
    @classmethod
    def _clamp_minute(cls, value: int) -> int:
        return _clamp(value, MINUTE_RANGE)

    @field_validator("selected_days")
    @classmethod
    def _valid_days(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        return _members(value, DAY_OF_WEEK_RANGE)

    @field_validator("days_of_month")
    @classmethod
    def _valid_days_of_month(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        return _members(value, DAY_OF_MONTH_RANGE)

    @field_validator("selected_months")
    @classmethod
    def _valid_months(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        return _members(value, MONTH_RANGE)

    @model_validator(mode="before")
    @classmethod
    def _sync_selected_days(cls, data):
        """Keep ``selected_days`` consistent with the named restriction."""
        if not isinstance(data, dict):
            return data
        try:
            restriction = DayRestriction(data.get("day_restriction", DayRestriction.ALL))
        except ValueError:
            return data  # field validation reports it
        if restriction != DayRestriction.CUSTOM:
            data = {**data, "selected_days": DAY_RESTRICTION_PRESETS[restriction]}
        return data


DEFAULT_SCHEDULE = ScheduleConfig()
