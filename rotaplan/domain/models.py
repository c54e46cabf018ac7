"""Domain dataclasses for rotation schedules."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class DayRecord:
    day: int
    date: date
    is_work_day: bool
    weekday: int
    is_weekend: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "date": self.date.isoformat(),
            "is_work_day": self.is_work_day,
            "weekday": self.weekday,
            "is_weekend": self.is_weekend,
        }


@dataclass
class RotationState:
    """Rotation phase carried from day to day and from month to month.

    ``on_duty`` means the next eligible weekday becomes a work day;
    ``rest_streak`` counts the rest days assigned since the last work day.
    """

    on_duty: bool = True
    rest_streak: int = 0

    def copy(self) -> "RotationState":
        return replace(self)

    def as_dict(self) -> Dict[str, Any]:
        return {"on_duty": self.on_duty, "rest_streak": self.rest_streak}


@dataclass(frozen=True)
class MonthSchedule:
    year: int
    month: int
    days: Tuple[DayRecord, ...]
    end_state: RotationState = field(default_factory=RotationState)

    @property
    def ym(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def work_days(self) -> int:
        return sum(1 for record in self.days if record.is_work_day)

    def __iter__(self):
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "month": self.ym,
            "year": self.year,
            "work_days": self.work_days,
            "days": [record.as_dict() for record in self.days],
            "end_state": self.end_state.as_dict(),
        }


__all__ = ["DayRecord", "RotationState", "MonthSchedule"]
