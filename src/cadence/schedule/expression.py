"""Translation between ScheduleConfig and 5-field cron expressions.

The two directions are deliberately not exact inverses. A ``days`` schedule
with a step overwrites any explicit days of month with ``*/N``, and parsing
treats "specific days of month, no step" as a monthly schedule. Neither
function raises: malformed input degrades to a default.
"""

from __future__ import annotations

import logging
import re

from cadence.config.constants import DEFAULT_CRON_EXPRESSION
from cadence.schedule.models import (
    DEFAULT_SCHEDULE,
    DayRestriction,
    IntervalUnit,
    ScheduleConfig,
)

logger = logging.getLogger("cadence.schedule.expression")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(token: str) -> int | None:
    """Read the integer a token starts with (``"1-3"`` → 1), or None."""
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else None


def _int_list(field: str) -> list[int]:
    values = (_leading_int(part) for part in field.split(","))
    return [v for v in values if v is not None]


def _step(field: str) -> int:
    value = _leading_int(field.split("/", 1)[1])
    return value if value is not None and value > 0 else 1


def _join(values) -> str:
    return ",".join(str(v) for v in sorted(values))


# -- Config → expression -------------------------------------------------------


def generate_cron_expression(config: ScheduleConfig) -> str:
    """Render *config* as ``"minute hour day-of-month month day-of-week"``."""
    value = config.interval_value

    dow = "*"
    if config.day_restriction == DayRestriction.WEEKDAYS:
        dow = "1-5"
    elif config.day_restriction == DayRestriction.WEEKENDS:
        dow = "0,6"
    elif config.day_restriction == DayRestriction.CUSTOM and 0 < len(config.selected_days) < 7:
        dow = _join(config.selected_days)

    month = "*"
    if 0 < len(config.selected_months) < 12:
        month = _join(config.selected_months)

    dom = "*"
    if 0 < len(config.days_of_month) < 31:
        dom = _join(config.days_of_month)

    unit = config.interval_unit
    if unit == IntervalUnit.MINUTES:
        minute = "*" if value == 1 else f"*/{value}"
        return f"{minute} * * {month} {dow}"

    if unit == IntervalUnit.HOURS:
        hour = "*" if value == 1 else f"*/{value}"
        return f"{config.minute} {hour} * {month} {dow}"

    if unit == IntervalUnit.DAYS:
        if value != 1:
            dom = f"*/{value}"
        return f"{config.minute} {config.hour} {dom} {month} {dow}"

    if unit == IntervalUnit.MONTHS:
        # Monthly runs always name their day(s); step notation never applies here
        dom = _join(config.days_of_month) if config.days_of_month else "1"
        month = "*" if value == 1 else f"*/{value}"
        return f"{config.minute} {config.hour} {dom} {month} {dow}"

    logger.debug("Unknown interval unit %r, using default schedule", unit)
    return DEFAULT_CRON_EXPRESSION


# -- Expression → config -------------------------------------------------------


def parse_cron_expression(expression: str) -> ScheduleConfig:
    """Reconstruct a best-effort ScheduleConfig from a cron expression.

    Anything that does not split into exactly five fields yields
    :data:`DEFAULT_SCHEDULE` (09:00 daily). Later fields may override the
    interval unit chosen by earlier ones: minute step, then hour step, then
    day-of-month step, then month step.
    """
    parts = expression.split() if isinstance(expression, str) else []
    if len(parts) != 5:
        logger.debug("Expected 5 cron fields, got %r; using default schedule", expression)
        return DEFAULT_SCHEDULE

    minute_part, hour_part, dom_part, month_part, dow_part = parts

    # Day of week
    day_restriction = DayRestriction.ALL
    selected_days: list[int] = []
    if dow_part == "1-5":
        day_restriction = DayRestriction.WEEKDAYS
    elif dow_part in ("0,6", "6,0"):
        day_restriction = DayRestriction.WEEKENDS
    elif dow_part != "*":
        day_restriction = DayRestriction.CUSTOM
        selected_days = _int_list(dow_part)

    selected_months: list[int] = []
    if month_part != "*" and "/" not in month_part:
        selected_months = _int_list(month_part)

    days_of_month: list[int] = []
    if dom_part != "*" and "/" not in dom_part:
        days_of_month = _int_list(dom_part)

    # Minute
    minute = 0
    interval_value = 1
    interval_unit = IntervalUnit.DAYS
    if "/" in minute_part:
        interval_unit = IntervalUnit.MINUTES
        interval_value = _step(minute_part)
    elif minute_part == "*":
        if hour_part == "*":
            interval_unit = IntervalUnit.MINUTES
            interval_value = 1
    else:
        parsed = _leading_int(minute_part)
        minute = parsed if parsed is not None else 0

    # Hour
    hour = 9
    if "/" in hour_part:
        interval_unit = IntervalUnit.HOURS
        interval_value = _step(hour_part)
    elif hour_part != "*":
        parsed = _leading_int(hour_part)
        hour = parsed if parsed is not None else hour
    elif interval_unit != IntervalUnit.MINUTES:
        interval_unit = IntervalUnit.HOURS

    if "/" in dom_part:
        interval_unit = IntervalUnit.DAYS
        interval_value = _step(dom_part)

    if "/" in month_part:
        interval_unit = IntervalUnit.MONTHS
        interval_value = _step(month_part)

    # Specific days of month without a day step read as a monthly schedule
    if interval_unit == IntervalUnit.DAYS and days_of_month and "/" not in dom_part:
        interval_unit = IntervalUnit.MONTHS
        interval_value = 1

    return ScheduleConfig(
        interval_value=interval_value,
        interval_unit=interval_unit,
        hour=hour,
        minute=minute,
        day_restriction=day_restriction,
        selected_days=selected_days,
        days_of_month=days_of_month,
        selected_months=selected_months,
    )
