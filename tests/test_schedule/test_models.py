"""Tests for schedule models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cadence.schedule.models import (
    DEFAULT_SCHEDULE,
    UNIT_OPTIONS,
    DayRestriction,
    IntervalUnit,
    ScheduleConfig,
)


def test_defaults_are_daily_at_nine():
    """A bare config should describe 09:00 every day."""
    config = ScheduleConfig()
    assert config.interval_value == 1
    assert config.interval_unit == IntervalUnit.DAYS
    assert (config.hour, config.minute) == (9, 0)
    assert config.day_restriction == DayRestriction.ALL
    assert config.selected_days == ()
    assert config.days_of_month == ()
    assert config.selected_months == ()
    assert config == DEFAULT_SCHEDULE


def test_config_is_immutable():
    """Configs are values; assignment should be rejected."""
    with pytest.raises(ValidationError):
        DEFAULT_SCHEDULE.hour = 10


def test_sets_are_sorted_and_deduplicated():
    config = ScheduleConfig(selected_months=[12, 3, 3, 1], days_of_month=[15, 1, 15])
    assert config.selected_months == (1, 3, 12)
    assert config.days_of_month == (1, 15)


def test_out_of_range_members_are_dropped():
    config = ScheduleConfig(
        day_restriction="custom",
        selected_days=[-1, 2, 7],
        days_of_month=[0, 31, 32],
        selected_months=[0, 12, 13],
    )
    assert config.selected_days == (2,)
    assert config.days_of_month == (31,)
    assert config.selected_months == (12,)


def test_scalars_are_clamped():
    """Out-of-range integers should never fail construction."""
    config = ScheduleConfig(interval_value=0, hour=30, minute=-5)
    assert config.interval_value == 1
    assert config.hour == 23
    assert config.minute == 0


@pytest.mark.parametrize(
    "restriction, expected",
    [
        ("weekdays", (1, 2, 3, 4, 5)),
        ("weekends", (0, 6)),
        ("all", ()),
    ],
)
def test_named_restrictions_derive_selected_days(restriction, expected):
    """selected_days must follow the named restriction, whatever is passed in."""
    config = ScheduleConfig(day_restriction=restriction, selected_days=[3])
    assert config.selected_days == expected


def test_custom_restriction_keeps_selected_days():
    config = ScheduleConfig(day_restriction="custom", selected_days=[5, 1])
    assert config.selected_days == (1, 5)


def test_unknown_unit_is_rejected():
    with pytest.raises(ValidationError):
        ScheduleConfig(interval_unit="weeks")


def test_enum_values():
    assert IntervalUnit.MINUTES == "minutes"
    assert DayRestriction.CUSTOM == "custom"


def test_minutes_option_is_quarter_hours():
    option = UNIT_OPTIONS[IntervalUnit.MINUTES]
    assert (option.min_value, option.max_value, option.step) == (15, 45, 15)
