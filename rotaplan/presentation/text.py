# -*- coding: utf-8 -*-
"""Plain-text rendering of generated months."""
from __future__ import annotations

from typing import List, Sequence

from rotaplan.domain.models import DayRecord, MonthSchedule

MONTH_NAMES = {
    1: "Январь", 2: "Февраль", 3: "Март", 4: "Апрель",
    5: "Май", 6: "Июнь", 7: "Июль", 8: "Август",
    9: "Сентябрь", 10: "Октябрь", 11: "Ноябрь", 12: "Декабрь",
}
DAY_NAMES = {
    1: "Пн", 2: "Вт", 3: "Ср", 4: "Чт",
    5: "Пт", 6: "Сб", 7: "Вс",
}

GREEN = "\033[32m"
RESET = "\033[0m"
WORK_MARK = "(+) - РАБОЧИЙ ДЕНЬ"
SEPARATOR_WIDTH = 50

USAGE = "\n".join(
    [
        "Пример использования:",
        "rotaplan - текущий месяц",
        "rotaplan 2024 3 - март 2024",
        "rotaplan 2024 3 6 - с марта 2024 на 6 месяцев",
    ]
)


def header(schedule: MonthSchedule) -> str:
    return f"=== Расписание работы на {MONTH_NAMES[schedule.month]} {schedule.year} ==="


def render_day(record: DayRecord, *, color: bool = True) -> str:
    line = f"{record.day:2d} {DAY_NAMES[record.weekday]}"
    if not record.is_work_day:
        return line
    line = f"{line} {WORK_MARK}"
    return f"{GREEN}{line}{RESET}" if color else line


def render_month(schedule: MonthSchedule, *, color: bool = True) -> str:
    lines: List[str] = ["", header(schedule), ""]
    lines.extend(render_day(record, color=color) for record in schedule)
    lines.append("")
    lines.append(f"Всего рабочих дней в месяце: {schedule.work_days}")
    return "\n".join(lines) + "\n"


def separator(width: int = SEPARATOR_WIDTH) -> str:
    return "-" * width


def render_range(
    months: Sequence[MonthSchedule],
    *,
    color: bool = True,
    separator_width: int = SEPARATOR_WIDTH,
) -> str:
    """Render one or more months; a run of several months gets a separator after each."""
    if len(months) == 1:
        return render_month(months[0], color=color)
    blocks = [
        render_month(schedule, color=color) + "\n" + separator(separator_width) + "\n"
        for schedule in months
    ]
    return "".join(blocks)


__all__ = [
    "DAY_NAMES",
    "MONTH_NAMES",
    "USAGE",
    "header",
    "render_day",
    "render_month",
    "render_range",
    "separator",
]
