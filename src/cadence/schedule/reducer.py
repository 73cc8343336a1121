"""Pure update functions for editing a ScheduleConfig.

Every function returns a new config; the input is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass

from cadence.schedule.models import (
    DAY_RESTRICTION_PRESETS,
    UNIT_OPTIONS,
    DayRestriction,
    IntervalUnit,
    ScheduleConfig,
)


@dataclass(frozen=True)
class ScheduleControls:
    """Which editors apply to a config's current interval unit."""

    time_of_day: bool
    minute_offset: bool
    day_restriction: bool
    advanced: bool


def clamp_interval_value(unit: IntervalUnit, value: int) -> int:
    """Clamp *value* to the unit's allowed range, snapped down to its step."""
    option = UNIT_OPTIONS[unit]
    value = max(option.min_value, min(option.max_value, value))
    return value - (value - option.min_value) % option.step


def update_schedule(config: ScheduleConfig, **changes) -> ScheduleConfig:
    """Apply *changes* the way the schedule editor does.

    - A new ``interval_unit`` resets ``interval_value`` to the unit's minimum
      and the day restriction to ``all``, unless those are given too.
    - A new ``day_restriction`` loads its preset days unless
      ``selected_days`` is given too.
    - ``interval_value`` is kept within the unit's bounds.
    """
    unknown = set(changes) - set(ScheduleConfig.model_fields)
    if unknown:
        raise TypeError(f"Unknown schedule fields: {', '.join(sorted(unknown))}")

    data = config.model_dump()

    if "interval_unit" in changes:
        unit = IntervalUnit(changes["interval_unit"])
        if unit != config.interval_unit:
            data["interval_value"] = UNIT_OPTIONS[unit].min_value
            data["day_restriction"] = DayRestriction.ALL
            data["selected_days"] = ()

    if "day_restriction" in changes and "selected_days" not in changes:
        restriction = DayRestriction(changes["day_restriction"])
        data["selected_days"] = DAY_RESTRICTION_PRESETS[restriction]

    data.update(changes)

    unit = IntervalUnit(data["interval_unit"])
    if "interval_value" in changes or "interval_unit" in changes:
        data["interval_value"] = clamp_interval_value(unit, int(data["interval_value"]))

    return ScheduleConfig.model_validate(data)


def _toggle(values: tuple[int, ...], value: int) -> tuple[int, ...]:
    if value in values:
        return tuple(v for v in values if v != value)
    return tuple(sorted((*values, value)))


def toggle_day(config: ScheduleConfig, day: int) -> ScheduleConfig:
    """Flip one day of the week in a custom day selection."""
    return update_schedule(
        config,
        day_restriction=DayRestriction.CUSTOM,
        selected_days=_toggle(config.selected_days, day),
    )


def toggle_day_of_month(config: ScheduleConfig, day: int) -> ScheduleConfig:
    return update_schedule(config, days_of_month=_toggle(config.days_of_month, day))


def toggle_month(config: ScheduleConfig, month: int) -> ScheduleConfig:
    return update_schedule(config, selected_months=_toggle(config.selected_months, month))


def visible_controls(config: ScheduleConfig) -> ScheduleControls:
    unit = config.interval_unit
    return ScheduleControls(
        time_of_day=unit in (IntervalUnit.DAYS, IntervalUnit.MONTHS),
        minute_offset=unit == IntervalUnit.HOURS,
        day_restriction=unit in (IntervalUnit.HOURS, IntervalUnit.DAYS),
        advanced=bool(config.days_of_month or config.selected_months),
    )
