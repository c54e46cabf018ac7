"""CSV report helpers."""
from __future__ import annotations

import csv
from io import StringIO
from pathlib import Path
from typing import Sequence, TextIO

from rotaplan.domain.models import MonthSchedule
from rotaplan.presentation.text import DAY_NAMES

HEADER = ["month", "date", "day", "weekday", "weekday_name", "is_work_day"]


def _write_rows(handle: TextIO, months: Sequence[MonthSchedule]) -> None:
    writer = csv.writer(handle)
    writer.writerow(HEADER)
    for schedule in months:
        for record in schedule:
            writer.writerow(
                [
                    schedule.ym,
                    record.date.isoformat(),
                    record.day,
                    record.weekday,
                    DAY_NAMES[record.weekday],
                    int(record.is_work_day),
                ]
            )


def write_days(path: str | Path, months: Sequence[MonthSchedule]) -> Path:
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as handle:
        _write_rows(handle, months)
    return path


def days_to_buffer(months: Sequence[MonthSchedule]) -> StringIO:
    buffer = StringIO()
    _write_rows(buffer, months)
    buffer.seek(0)
    return buffer


__all__ = ["HEADER", "write_days", "days_to_buffer"]
