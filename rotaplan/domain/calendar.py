"""Calendar helpers: month lengths, ISO weekdays and month arithmetic."""
from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date
from typing import Tuple

WEEKEND = frozenset({6, 7})


class InvalidDate(ValueError):
    """Raised when a year/month/day triple is outside the calendar."""


def _check_month(year: int, month: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDate(f"year {year} is out of range {MINYEAR}..{MAXYEAR}")
    if not 1 <= month <= 12:
        raise InvalidDate(f"month {month} is out of range 1..12")


def days_in_month(year: int, month: int) -> int:
    _check_month(year, month)
    return calendar.monthrange(year, month)[1]


def weekday_of(year: int, month: int, day: int) -> int:
    """ISO weekday of the given day: 1 = Monday ... 7 = Sunday."""
    _check_month(year, month)
    try:
        return date(year, month, day).isoweekday()
    except ValueError as exc:
        raise InvalidDate(f"{year:04d}-{month:02d}-{day:02d}: {exc}") from exc


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """Fold a month number past December into the following year(s)."""
    while month > 12:
        month -= 12
        year += 1
    return year, month


__all__ = [
    "WEEKEND",
    "InvalidDate",
    "days_in_month",
    "weekday_of",
    "normalize_month",
]
