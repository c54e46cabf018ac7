"""Domain objects for the rotation planner."""

from .calendar import InvalidDate, days_in_month, normalize_month, weekday_of
from .models import DayRecord, MonthSchedule, RotationState

__all__ = [
    "DayRecord",
    "InvalidDate",
    "MonthSchedule",
    "RotationState",
    "days_in_month",
    "normalize_month",
    "weekday_of",
]
