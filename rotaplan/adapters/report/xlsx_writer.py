# -*- coding: utf-8 -*-
"""Excel report writer: one sheet per month."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Sequence, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from rotaplan.domain.models import MonthSchedule
from rotaplan.presentation.text import DAY_NAMES, MONTH_NAMES

FILL_WORK = PatternFill("solid", fgColor="C6EFCE")
FILL_WEEKEND = PatternFill("solid", fgColor="E2F0D9")
FONT_WORK = Font(color="006100", bold=True)
HEADER_FONT = Font(bold=True)
CENTER = Alignment(horizontal="center", vertical="center")

B_THIN = Border(
    left=Side(style="thin", color="DDDDDD"),
    right=Side(style="thin", color="DDDDDD"),
    top=Side(style="thin", color="DDDDDD"),
    bottom=Side(style="thin", color="DDDDDD"),
)

COLUMNS = ("Дата", "День", "Рабочий")


def _write_month(ws, schedule: MonthSchedule) -> None:
    ws.cell(row=1, column=1, value=f"{MONTH_NAMES[schedule.month]} {schedule.year}").font = HEADER_FONT
    for col, title in enumerate(COLUMNS, start=1):
        cell = ws.cell(row=2, column=col, value=title)
        cell.font = HEADER_FONT
        cell.alignment = CENTER
        cell.border = B_THIN

    row = 3
    for record in schedule:
        values = (record.date, DAY_NAMES[record.weekday], "+" if record.is_work_day else "")
        for col, value in enumerate(values, start=1):
            cell = ws.cell(row=row, column=col, value=value)
            cell.alignment = CENTER
            cell.border = B_THIN
            if record.is_work_day:
                cell.fill = FILL_WORK
                cell.font = FONT_WORK
            elif record.is_weekend:
                cell.fill = FILL_WEEKEND
        ws.cell(row=row, column=1).number_format = "DD.MM.YYYY"
        row += 1

    ws.cell(row=row + 1, column=1, value="Всего рабочих дней").font = HEADER_FONT
    ws.cell(row=row + 1, column=3, value=schedule.work_days).font = HEADER_FONT

    ws.freeze_panes = "A3"
    ws.column_dimensions["A"].width = 14
    ws.column_dimensions["B"].width = 8
    ws.column_dimensions["C"].width = 10


def build_workbook(months: Sequence[MonthSchedule]) -> Workbook:
    wb = Workbook()
    wb.remove(wb.active)
    for schedule in months:
        _write_month(wb.create_sheet(title=schedule.ym), schedule)
    return wb


def write_workbook(target: Union[str, Path, BinaryIO], months: Sequence[MonthSchedule]):
    """Save an XLSX with a sheet per month to a path or a binary stream."""
    if not months:
        raise ValueError("nothing to export: no months generated")
    wb = build_workbook(months)
    if isinstance(target, (str, Path)):
        target = Path(target)
    wb.save(target)
    return target


def workbook_to_buffer(months: Sequence[MonthSchedule]) -> BytesIO:
    buffer = BytesIO()
    write_workbook(buffer, months)
    buffer.seek(0)
    return buffer


__all__ = ["build_workbook", "write_workbook", "workbook_to_buffer"]
