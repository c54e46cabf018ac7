"""Blueprint serving generated schedules as JSON, CSV and XLSX."""

from __future__ import annotations

from datetime import date
from typing import List

from flask import Blueprint, Response, current_app, jsonify, request

from rotaplan.adapters.report import csv_writer, xlsx_writer
from rotaplan.domain.models import MonthSchedule
from rotaplan.services import statistics
from rotaplan.services.scheduler import SchedulerService

bp = Blueprint("schedule", __name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
_TRUTHY = {"1", "true", "yes", "on"}
MAX_MONTHS = 120


class BadQuery(ValueError):
    """Malformed query string value."""


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise BadQuery(f"'{name}' must be an integer, got {raw!r}") from exc


@bp.errorhandler(BadQuery)
def bad_query(exc: BadQuery):
    return jsonify({"ok": False, "error": str(exc)}), 400


def _generate() -> List[MonthSchedule]:
    today = date.today()
    year = _int_arg("year", today.year)
    month = _int_arg("month", today.month)
    count = _int_arg("months", 1)
    if count < 1:
        raise BadQuery(f"'months' must be positive, got {count}")
    if count > MAX_MONTHS:
        raise BadQuery(f"'months' must be at most {MAX_MONTHS}, got {count}")

    config = dict(current_app.config["ROTAPLAN"])
    legacy = request.args.get("legacy")
    if legacy is not None:
        config["rotation"] = {**config.get("rotation", {}), "legacy_carry_over": legacy.lower() in _TRUTHY}
    return SchedulerService(config).generate_range(year, month, count)


def _filename(months: List[MonthSchedule], suffix: str) -> str:
    if len(months) == 1:
        return f"schedule_{months[0].ym}.{suffix}"
    return f"schedule_{months[0].ym}_{months[-1].ym}.{suffix}"


@bp.get("/api/schedule")
def get_schedule():
    months = _generate()
    return jsonify(
        {
            "ok": True,
            "months": [schedule.as_dict() for schedule in months],
            "totals": statistics.totals(months),
        }
    )


@bp.get("/api/schedule.csv")
def export_csv():
    months = _generate()
    buffer = csv_writer.days_to_buffer(months)
    return Response(
        buffer.getvalue(),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={_filename(months, 'csv')}"},
    )


@bp.get("/api/export/xlsx")
def export_xlsx():
    months = _generate()
    stream = xlsx_writer.workbook_to_buffer(months)
    return (stream.getvalue(), 200, {
        "Content-Type": XLSX_MIMETYPE,
        "Content-Disposition": f"attachment; filename={_filename(months, 'xlsx')}",
    })
