"""Rotation planner package exposing primary components."""

from .domain.calendar import InvalidDate, days_in_month, normalize_month, weekday_of
from .domain.models import DayRecord, MonthSchedule, RotationState
from .services.scheduler import SchedulerService, generate, generate_range

__all__ = [
    "DayRecord",
    "InvalidDate",
    "MonthSchedule",
    "RotationState",
    "SchedulerService",
    "days_in_month",
    "generate",
    "generate_range",
    "normalize_month",
    "weekday_of",
]
