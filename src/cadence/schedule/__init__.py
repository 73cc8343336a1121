"""Schedule expression engine: config to cron and back, run preview, descriptions."""

from cadence.schedule.describe import format_run, get_runs_info, get_schedule_description
from cadence.schedule.expression import generate_cron_expression, parse_cron_expression
from cadence.schedule.models import DEFAULT_SCHEDULE, DayRestriction, IntervalUnit, ScheduleConfig
from cadence.schedule.simulate import expand_field, get_next_scheduled_runs

__all__ = [
    "DEFAULT_SCHEDULE",
    "DayRestriction",
    "IntervalUnit",
    "ScheduleConfig",
    "expand_field",
    "format_run",
    "generate_cron_expression",
    "get_next_scheduled_runs",
    "get_runs_info",
    "get_schedule_description",
    "parse_cron_expression",
]
