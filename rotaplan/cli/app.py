# -*- coding: utf-8 -*-
"""Command line entry point: print the rotation schedule for one or more months."""
from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

from rotaplan.adapters.config_loader import ConfigError, build_config
from rotaplan.adapters.report import csv_writer, xlsx_writer
from rotaplan.domain.calendar import InvalidDate
from rotaplan.domain.models import MonthSchedule
from rotaplan.infrastructure.logger import setup_logger
from rotaplan.presentation import text
from rotaplan.services.scheduler import SchedulerService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rotaplan",
        description="Print a work/rest rotation schedule: one work day, then two days off.",
    )
    parser.add_argument("year", nargs="?", type=int, help="Year (default: current year)")
    parser.add_argument("month", nargs="?", type=int, help="Month 1..12 (default: current month)")
    parser.add_argument("months", nargs="?", type=int, default=1, help="How many consecutive months")
    parser.add_argument("--config", dest="config", help="JSON or YAML file with config overrides")
    parser.add_argument(
        "--legacy-carry-over",
        dest="legacy_carry_over",
        action="store_true",
        default=None,
        help="Re-derive the state at month boundaries from the month's tail",
    )
    parser.add_argument("--no-color", dest="color", action="store_false", default=None, help="Disable ANSI colors")
    parser.add_argument("--csv", dest="csv_path", help="Also write the days to a CSV file")
    parser.add_argument("--xlsx", dest="xlsx_path", help="Also write an XLSX workbook, one sheet per month")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _resolve_period(args: argparse.Namespace, today: date) -> tuple[int, int, int]:
    year = args.year if args.year is not None else today.year
    month = args.month if args.month is not None else today.month
    return year, month, args.months


def _cli_overrides(args: argparse.Namespace) -> dict:
    overrides: dict = {}
    if args.legacy_carry_over is not None:
        overrides.setdefault("rotation", {})["legacy_carry_over"] = args.legacy_carry_over
    if args.color is not None:
        overrides.setdefault("output", {})["color"] = args.color
    if args.debug:
        overrides.setdefault("logging", {})["level"] = "DEBUG"
    return overrides


def _export(months: List[MonthSchedule], args: argparse.Namespace) -> None:
    if args.csv_path:
        path = csv_writer.write_days(Path(args.csv_path), months)
        logger.info(f"CSV written: {path}")
    if args.xlsx_path:
        path = xlsx_writer.write_workbook(Path(args.xlsx_path), months)
        logger.info(f"XLSX written: {path}")


def main(argv: Optional[Iterable[str]] = None, *, today: Optional[date] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = build_config(args.config, _cli_overrides(args))
    except ConfigError as exc:
        raise SystemExit(f"Ошибка конфигурации: {exc}") from exc

    log_cfg = config.get("logging", {}) or {}
    setup_logger(level=log_cfg.get("level", "INFO"), log_file=log_cfg.get("file"))

    year, month, count = _resolve_period(args, today or date.today())
    if count < 1:
        logger.error(f"month count must be positive, got {count}")
        raise SystemExit(1)

    service = SchedulerService(config)
    try:
        months = service.generate_range(year, month, count)
    except InvalidDate as exc:
        logger.error(f"Invalid date: {exc}")
        raise SystemExit(1) from exc

    out_cfg = config.get("output", {}) or {}
    sys.stdout.write(
        text.render_range(
            months,
            color=bool(out_cfg.get("color", True)),
            separator_width=int(out_cfg.get("separator_width", text.SEPARATOR_WIDTH)),
        )
    )
    _export(months, args)

    if out_cfg.get("show_usage", True):
        sys.stdout.write("\n" + text.USAGE + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
