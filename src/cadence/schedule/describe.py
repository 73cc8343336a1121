"""Human-readable summaries of schedules and projected runs."""

from __future__ import annotations

from datetime import datetime

from cadence.config.constants import DEFAULT_LOCALE
from cadence.schedule.models import DayRestriction, IntervalUnit, ScheduleConfig

# Message catalogs, keyed by locale then message id
_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "every_minute": "Every minute",
        "every_n_minutes": "Every {n} minutes",
        "hourly": "Every hour at :{minute:02d}",
        "every_n_hours": "Every {n} hours at :{minute:02d}",
        "daily": "Every day at {time}",
        "every_n_days": "Every {n} days at {time}",
        "monthly": "Monthly on day {days} at {time}",
        "every_n_months": "Every {n} months on day {days} at {time}",
        "weekdays_only": "(weekdays only)",
        "weekends_only": "(weekends only)",
        "custom_days_only": "(only {days})",
        "months_only": "[{months}]",
        "per_day": "about {n} runs a day",
        "once_a_day": "once a day",
        "once_per_n_days": "once every {n} days",
        "once_a_month": "once a month",
        "once_per_n_months": "once every {n} months",
        "info_weekdays": " (weekdays)",
        "info_weekends": " (weekends)",
        "info_custom": " ({n} days a week)",
        "run_format": "{weekday} {date} {time}",
    },
    "ko": {
        "every_minute": "매분",
        "every_n_minutes": "{n}분마다",
        "hourly": "매시간 {minute}분",
        "every_n_hours": "{n}시간마다 {minute}분",
        "daily": "매일 {time}",
        "every_n_days": "{n}일마다 {time}",
        "monthly": "매월 {days}일 {time}",
        "every_n_months": "{n}개월마다 {days}일 {time}",
        "weekdays_only": "(평일만)",
        "weekends_only": "(주말만)",
        "custom_days_only": "({days}요일만)",
        "months_only": "[{months}]",
        "per_day": "하루 약 {n}회",
        "once_a_day": "하루 1회",
        "once_per_n_days": "{n}일마다 1회",
        "once_a_month": "월 1회",
        "once_per_n_months": "{n}개월마다 1회",
        "info_weekdays": " (평일)",
        "info_weekends": " (주말)",
        "info_custom": " (주 {n}일)",
        "run_format": "{date} ({weekday}) {time}",
    },
}

# Sunday-first, matching cron day-of-week numbering
_DAY_NAMES = {
    "en": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    "ko": ("일", "월", "화", "수", "목", "금", "토"),
}

_MONTH_NAMES = {
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "ko": tuple(f"{m}월" for m in range(1, 13)),
}


def _catalog(locale: str) -> str:
    return locale if locale in _MESSAGES else DEFAULT_LOCALE


def get_schedule_description(config: ScheduleConfig, locale: str = DEFAULT_LOCALE) -> str:
    """Summarise *config* in one line, e.g. ``"Every day at 14:30 (weekdays only)"``."""
    loc = _catalog(locale)
    msg = _MESSAGES[loc]
    n = config.interval_value
    time = f"{config.hour:02d}:{config.minute:02d}"

    parts: list[str] = []
    unit = config.interval_unit
    if unit == IntervalUnit.MINUTES:
        parts.append(msg["every_minute"] if n == 1 else msg["every_n_minutes"].format(n=n))
    elif unit == IntervalUnit.HOURS:
        key = "hourly" if n == 1 else "every_n_hours"
        parts.append(msg[key].format(n=n, minute=config.minute))
    elif unit == IntervalUnit.DAYS:
        key = "daily" if n == 1 else "every_n_days"
        parts.append(msg[key].format(n=n, time=time))
    elif unit == IntervalUnit.MONTHS:
        days = ", ".join(str(d) for d in config.days_of_month) or "1"
        key = "monthly" if n == 1 else "every_n_months"
        parts.append(msg[key].format(n=n, days=days, time=time))

    if config.day_restriction == DayRestriction.WEEKDAYS:
        parts.append(msg["weekdays_only"])
    elif config.day_restriction == DayRestriction.WEEKENDS:
        parts.append(msg["weekends_only"])
    elif config.day_restriction == DayRestriction.CUSTOM and 0 < len(config.selected_days) < 7:
        names = ", ".join(_DAY_NAMES[loc][d] for d in config.selected_days)
        parts.append(msg["custom_days_only"].format(days=names))

    if 0 < len(config.selected_months) < 12:
        names = ", ".join(_MONTH_NAMES[loc][m - 1] for m in config.selected_months)
        parts.append(msg["months_only"].format(months=names))

    return " ".join(parts)


def get_runs_info(config: ScheduleConfig, locale: str = DEFAULT_LOCALE) -> str:
    """Approximate run frequency, e.g. ``"about 96 runs a day"``."""
    msg = _MESSAGES[_catalog(locale)]
    n = config.interval_value

    unit = config.interval_unit
    if unit == IntervalUnit.MINUTES:
        info = msg["per_day"].format(n=1440 // n)
    elif unit == IntervalUnit.HOURS:
        info = msg["per_day"].format(n=24 // n)
    elif unit == IntervalUnit.DAYS:
        info = msg["once_a_day"] if n == 1 else msg["once_per_n_days"].format(n=n)
    elif unit == IntervalUnit.MONTHS:
        info = msg["once_a_month"] if n == 1 else msg["once_per_n_months"].format(n=n)
    else:
        return ""

    if config.day_restriction == DayRestriction.WEEKDAYS:
        info += msg["info_weekdays"]
    elif config.day_restriction == DayRestriction.WEEKENDS:
        info += msg["info_weekends"]
    elif config.day_restriction == DayRestriction.CUSTOM and 0 < len(config.selected_days) < 7:
        info += msg["info_custom"].format(n=len(config.selected_days))
    return info


def format_run(run: datetime, locale: str = DEFAULT_LOCALE) -> str:
    """Render a projected run for display."""
    loc = _catalog(locale)
    weekday = _DAY_NAMES[loc][run.isoweekday() % 7]
    return _MESSAGES[loc]["run_format"].format(
        weekday=weekday,
        date=run.strftime("%Y-%m-%d"),
        time=run.strftime("%H:%M"),
    )
