"""High level orchestration for schedule generation."""
from __future__ import annotations

from datetime import date
from typing import AbstractSet, Any, Dict, List, Mapping, Optional, Tuple

from loguru import logger

from rotaplan.domain.calendar import WEEKEND, days_in_month, normalize_month, weekday_of
from rotaplan.domain.models import DayRecord, MonthSchedule, RotationState
from rotaplan.rules import rotor
from rotaplan.rules.carry_over import carry_over


def generate(
    year: int,
    month: int,
    initial_state: Optional[RotationState] = None,
    *,
    rest_days: int = rotor.REST_DAYS,
    weekend: AbstractSet[int] = WEEKEND,
) -> Tuple[List[DayRecord], RotationState]:
    """Walk one month day by day and mark work and rest days.

    The caller's *initial_state* is not modified; the state as of the last
    day of the month is returned next to the records.
    """
    total = days_in_month(year, month)
    state = initial_state.copy() if initial_state is not None else RotationState()
    records: List[DayRecord] = []
    for day in range(1, total + 1):
        weekday = weekday_of(year, month, day)
        is_work = rotor.advance(state, weekday, rest_days=rest_days, weekend=weekend)
        records.append(
            DayRecord(
                day=day,
                date=date(year, month, day),
                is_work_day=is_work,
                weekday=weekday,
                is_weekend=weekday in weekend,
            )
        )
    return records, state


def generate_range(
    start_year: int,
    start_month: int,
    month_count: int,
    initial_state: Optional[RotationState] = None,
    *,
    legacy_carry_over: bool = False,
    rest_days: int = rotor.REST_DAYS,
    weekend: AbstractSet[int] = WEEKEND,
) -> List[MonthSchedule]:
    """Generate ``month_count`` consecutive months, threading the rotation state."""
    if month_count < 0:
        raise ValueError(f"month_count must be >= 0, got {month_count}")
    # only offsets past December are folded, the starting month itself must exist
    days_in_month(start_year, start_month)

    months: List[MonthSchedule] = []
    state = initial_state.copy() if initial_state is not None else RotationState()
    for offset in range(month_count):
        year, month = normalize_month(start_year, start_month + offset)
        records, final_state = generate(year, month, state, rest_days=rest_days, weekend=weekend)
        months.append(MonthSchedule(year=year, month=month, days=tuple(records), end_state=final_state))
        state = carry_over(records, final_state, legacy=legacy_carry_over, rest_days=rest_days)
        logger.debug(
            "{}-{:02d}: {} work days, carry {}",
            year,
            month,
            months[-1].work_days,
            state,
        )
    return months


class SchedulerService:
    """Binds the ``rotation`` configuration section to the generator."""

    def __init__(self, config: Mapping[str, Any]):
        rotation: Dict[str, Any] = dict(config.get("rotation", {}) or {})
        self.rest_days = int(rotation.get("rest_days", rotor.REST_DAYS))
        self.weekend = frozenset(int(day) for day in rotation.get("weekend_days", WEEKEND))
        self.legacy_carry_over = bool(rotation.get("legacy_carry_over", False))

    def generate_month(
        self,
        year: int,
        month: int,
        state: Optional[RotationState] = None,
    ) -> MonthSchedule:
        records, final_state = generate(
            year, month, state, rest_days=self.rest_days, weekend=self.weekend
        )
        return MonthSchedule(year=year, month=month, days=tuple(records), end_state=final_state)

    def generate_range(
        self,
        year: int,
        month: int,
        count: int,
        state: Optional[RotationState] = None,
    ) -> List[MonthSchedule]:
        months = generate_range(
            year,
            month,
            count,
            state,
            legacy_carry_over=self.legacy_carry_over,
            rest_days=self.rest_days,
            weekend=self.weekend,
        )
        if months:
            logger.info(
                "Generated {} month(s) from {} to {}: {} work days",
                len(months),
                months[0].ym,
                months[-1].ym,
                sum(m.work_days for m in months),
            )
        return months


__all__ = ["SchedulerService", "generate", "generate_range"]
