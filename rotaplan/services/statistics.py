"""Derive statistics from generated months."""
from __future__ import annotations

from typing import Any, Dict, Iterable

from rotaplan.domain.models import MonthSchedule


def summarize(schedule: MonthSchedule) -> Dict[str, Any]:
    work = rest = weekend_rest = 0
    for record in schedule:
        if record.is_work_day:
            work += 1
            continue
        rest += 1
        if record.is_weekend:
            weekend_rest += 1
    return {
        "month": schedule.ym,
        "days": len(schedule),
        "work_days": work,
        "rest_days": rest,
        "weekend_rest_days": weekend_rest,
    }


def totals(months: Iterable[MonthSchedule]) -> Dict[str, int]:
    out = {"months": 0, "days": 0, "work_days": 0, "rest_days": 0, "weekend_rest_days": 0}
    for schedule in months:
        summary = summarize(schedule)
        out["months"] += 1
        for key in ("days", "work_days", "rest_days", "weekend_rest_days"):
            out[key] += summary[key]
    return out


__all__ = ["summarize", "totals"]
