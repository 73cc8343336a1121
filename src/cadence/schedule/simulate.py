"""Forward simulation of the next wall-clock minutes a cron expression fires on.

Timestamps are naive host-local datetimes. There is no timezone or DST model.

Day-of-month and day-of-week are ANDed: when both are restricted a minute must
satisfy both, unlike classic cron which fires when either matches.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from cadence.config.constants import (
    DAY_OF_MONTH_RANGE,
    DAY_OF_WEEK_RANGE,
    DEFAULT_PREVIEW_COUNT,
    HOUR_RANGE,
    MAX_SIMULATION_MINUTES,
    MINUTE_RANGE,
    MONTH_RANGE,
)

logger = logging.getLogger("cadence.schedule.simulate")

_ONE_MINUTE = timedelta(minutes=1)


def _term(term: str, minimum: int, maximum: int) -> set[int]:
    """Expand a single literal or ``a-b`` range, kept within the field bounds."""
    if "-" in term:
        start, _, end = term.partition("-")
        return set(range(max(int(start), minimum), min(int(end), maximum) + 1))
    value = int(term)
    return {value} if minimum <= value <= maximum else set()


def _day_step(field: str) -> int | None:
    try:
        step = int(field.partition("/")[2])
    except ValueError:
        return None
    return step if step > 0 else None


def expand_field(field: str, minimum: int, maximum: int) -> frozenset[int]:
    """Expand one cron field into the explicit set of values it allows.

    Supports ``*``, ``*/N``, ``B/N``, ``a,b,c``, ``a-b`` and literals.
    Unreadable fields and non-positive steps expand to the empty set.
    """
    try:
        if field == "*":
            return frozenset(range(minimum, maximum + 1))
        if "/" in field:
            base, _, step_text = field.partition("/")
            step = int(step_text)
            if step <= 0:
                return frozenset()
            start = minimum if base == "*" else int(base)
            return frozenset(range(start, maximum + 1, step))
        values: set[int] = set()
        for term in field.split(","):
            values |= _term(term, minimum, maximum)
        return frozenset(values)
    except ValueError:
        logger.debug("Unreadable cron field %r", field)
        return frozenset()


def _cron_weekday(moment: datetime) -> int:
    return moment.isoweekday() % 7  # Sunday = 0


def get_next_scheduled_runs(
    expression: str,
    count: int = DEFAULT_PREVIEW_COUNT,
    now: datetime | None = None,
) -> list[datetime]:
    """Return up to *count* future minutes matching *expression*, ascending.

    Walks forward minute by minute from *now* (default: host-local
    ``datetime.now()``), truncated to the minute, never returning *now*
    itself. Gives up after :data:`MAX_SIMULATION_MINUTES` steps, so the result
    may hold fewer than *count* runs. Malformed expressions yield ``[]``.
    """
    parts = expression.split() if isinstance(expression, str) else []
    if len(parts) != 5 or count <= 0:
        return []

    minute_part, hour_part, dom_part, month_part, dow_part = parts
    minutes = expand_field(minute_part, *MINUTE_RANGE)
    hours = expand_field(hour_part, *HOUR_RANGE)
    months = expand_field(month_part, *MONTH_RANGE)
    days = None if dom_part == "*" or "/" in dom_part else expand_field(dom_part, *DAY_OF_MONTH_RANGE)
    weekdays = None if dow_part == "*" else expand_field(dow_part, *DAY_OF_WEEK_RANGE)

    day_step = None
    if "/" in dom_part:
        # A day step counts from the 1st of every month, whatever its base
        day_step = _day_step(dom_part)
        if day_step is None:
            return []

    if not minutes or not hours or not months or days == frozenset() or weekdays == frozenset():
        # Nothing can ever match; walking the cap would only confirm it
        return []

    current = (now or datetime.now()).replace(second=0, microsecond=0)
    runs: list[datetime] = []
    attempts = 0
    while len(runs) < count and attempts < MAX_SIMULATION_MINUTES:
        attempts += 1
        current += _ONE_MINUTE

        if current.minute not in minutes or current.hour not in hours:
            continue
        if current.month not in months:
            continue
        if days is not None and current.day not in days:
            continue
        if day_step is not None and (current.day - 1) % day_step != 0:
            continue
        if weekdays is not None and _cron_weekday(current) not in weekdays:
            continue
        runs.append(current)

    if len(runs) < count:
        logger.debug(
            "Found %d of %d runs for %r within %d minutes",
            len(runs), count, expression, MAX_SIMULATION_MINUTES,
        )
    return runs
