from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .attendance import SALARY_TYPES, SalaryProfile, estimate_weekly_pay, load_attendance_csv, week_bounds
from .calculator import compute_aguinaldo, compute_finiquito, compute_weekly_pay, prorate_aguinaldo
from .config import get_settings
from .constants import PAYROLL_CONSTANTS, currency_config
from .errors import DataFileError, NominaError
from .formatting import format_currency, format_hours
from .logging import configure_logging, get_logger
from .models import FiniquitoInput, WeeklyPayInput
from .salary import calculate_daily_salary, calculate_monthly_salary
from .wizard import PayrollPreview

logger = get_logger(__name__)


class BatchEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    employee_id: str
    hourly_rate: Decimal
    hours: Decimal
    overtime_hours: Decimal = Decimal("0")
    overtime_factor: Decimal = Decimal(str(PAYROLL_CONSTANTS.overtime_factor))
    bonuses: List[Any] = Field(default_factory=list)
    deductions: List[Any] = Field(default_factory=list)

    def to_input(self) -> WeeklyPayInput:
        return WeeklyPayInput(
            hourly_rate=self.hourly_rate,
            hours=self.hours,
            overtime_hours=self.overtime_hours,
            overtime_factor=self.overtime_factor,
            bonuses=tuple(self.bonuses),
            deductions=tuple(self.deductions),
        )


def amount(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}") from None


def money(value: Any) -> str:
    config = currency_config()
    return format_currency(value, config.code, config.locale)


def emit(args: argparse.Namespace, payload: Dict[str, Any], lines: List[tuple]) -> None:
    if args.json:
        print(json.dumps(payload, default=str, indent=2))
        return
    width = max(len(label) for label, _ in lines)
    for label, value in lines:
        print(f"{label:<{width}}  {value}")


def cmd_weekly(args: argparse.Namespace) -> None:
    result = compute_weekly_pay(
        hourly_rate=args.rate,
        hours=args.hours,
        overtime_hours=args.overtime,
        overtime_factor=args.factor,
        bonuses=args.bonus or (),
        deductions=args.deduction or (),
    )
    emit(
        args,
        result.to_dict(),
        [
            ("Regular pay", money(result.regular_pay)),
            ("Overtime pay", money(result.overtime_pay)),
            ("Bonuses", money(result.total_bonuses)),
            ("Deductions", money(result.total_deductions)),
            ("Gross pay", money(result.gross_pay)),
            ("Net pay", money(result.net_pay)),
        ],
    )


def cmd_aguinaldo(args: argparse.Namespace) -> None:
    result = compute_aguinaldo(daily_salary=args.daily, days_per_year=args.days, tenure_years=args.tenure)
    emit(
        args,
        result.to_dict(),
        [
            ("Base days", result.base_days),
            ("Additional days", result.additional_days),
            ("Total days", result.total_days),
            ("Aguinaldo", money(result.aguinaldo_amount)),
        ],
    )


def cmd_finiquito(args: argparse.Namespace) -> None:
    proportional = args.aguinaldo
    if args.aguinaldo_days_worked is not None:
        # full-year bonus first, then the share for the days actually worked
        full_year = compute_aguinaldo(daily_salary=args.daily, tenure_years=args.tenure)
        proportional = prorate_aguinaldo(full_year.aguinaldo_amount, args.aguinaldo_days_worked)
    result = compute_finiquito(
        FiniquitoInput(
            daily_salary=args.daily,
            pending_days=args.pending,
            vacations=args.vacations,
            vacation_bonus_pct=args.bonus_pct,
            proportional_aguinaldo=proportional,
        )
    )
    emit(
        args,
        result.to_dict(),
        [
            ("Pending pay", money(result.pending_pay)),
            ("Vacation pay", money(result.vacation_pay)),
            ("Vacation bonus", money(result.vacation_bonus)),
            ("Proportional aguinaldo", money(result.proportional_aguinaldo)),
            ("Total finiquito", money(result.total_finiquito)),
        ],
    )


def cmd_daily_salary(args: argparse.Namespace) -> None:
    print(calculate_daily_salary(args.rate, args.hours_per_day))


def cmd_monthly_salary(args: argparse.Namespace) -> None:
    print(calculate_monthly_salary(args.daily, args.days_per_month))


def cmd_format(args: argparse.Namespace) -> None:
    config = currency_config()
    print(format_currency(args.amount, args.currency or config.code, args.locale or config.locale))


def cmd_estimate(args: argparse.Namespace) -> None:
    profile = SalaryProfile(
        employee_id=args.employee,
        salary_type=args.salary_type,
        daily_salary=args.daily,
        hourly_rate=args.rate,
    )
    start, end = week_bounds(args.anchor)
    estimate = estimate_weekly_pay(profile, load_attendance_csv(Path(args.path)), start, end)
    payload = {
        "employeeId": estimate.employee_id,
        "weekStart": estimate.week_start.isoformat(),
        "weekEnd": estimate.week_end.isoformat(),
        "salaryType": estimate.salary_type,
        "workedDays": estimate.worked_days,
        "regularHours": estimate.regular_hours,
        "overtimeHours": estimate.overtime_hours,
        "basePay": estimate.base_pay,
        "overtimePay": estimate.overtime_pay,
        "grossTotal": estimate.gross_total,
        "netTotal": estimate.net_total,
    }
    emit(
        args,
        payload,
        [
            ("Week", f"{start.isoformat()} - {end.isoformat()}"),
            ("Worked days", estimate.worked_days),
            ("Regular hours", format_hours(estimate.regular_hours)),
            ("Overtime hours", format_hours(estimate.overtime_hours)),
            ("Base pay", money(estimate.base_pay)),
            ("Overtime pay", money(estimate.overtime_pay)),
            ("Gross total", money(estimate.gross_total)),
        ],
    )


def cmd_batch(args: argparse.Namespace) -> None:
    path = Path(args.path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            rows = json.load(handle)
    except json.JSONDecodeError as exc:
        raise DataFileError(path, f"not valid JSON ({exc.msg} at line {exc.lineno})") from None
    if not isinstance(rows, list):
        raise DataFileError(path, "expected a JSON list of employees")
    try:
        entries = [BatchEntry.model_validate(row) for row in rows]
    except ValidationError as exc:
        raise SystemExit(f"error: invalid batch file {args.path}: {exc}") from None

    requests: Dict[str, WeeklyPayInput] = {}
    for entry in entries:
        if entry.employee_id in requests:
            raise DataFileError(path, f"employee {entry.employee_id!r} appears more than once")
        requests[entry.employee_id] = entry.to_input()
    totals = PayrollPreview().preview(requests)
    if args.json:
        payload = {
            "employees": {emp: result.to_dict() for emp, result in totals.employees.items()},
            "grossPay": totals.gross_pay,
            "totalNetPay": totals.total_net_pay,
        }
        print(json.dumps(payload, default=str, indent=2))
        return
    for employee_id, result in sorted(totals.employees.items()):
        print(f"{employee_id} gross: {money(result.gross_pay)} net: {money(result.net_pay)}")
    print(f"Total gross: {money(totals.gross_pay)}")
    print(f"Total net: {money(totals.total_net_pay)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Payroll calculations: weekly pay, aguinaldo and finiquito")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    weekly = sub.add_parser("weekly", help="Weekly pay with overtime, bonuses and deductions")
    weekly.add_argument("rate", type=amount, help="Hourly rate")
    weekly.add_argument("hours", type=amount)
    weekly.add_argument("--overtime", type=amount, default=Decimal("0"), help="Overtime hours")
    weekly.add_argument("--factor", type=amount, default=Decimal(str(PAYROLL_CONSTANTS.overtime_factor)))
    weekly.add_argument("--bonus", type=amount, action="append", help="Bonus amount, repeatable")
    weekly.add_argument("--deduction", type=amount, action="append", help="Deduction amount, repeatable")
    weekly.set_defaults(func=cmd_weekly)

    aguinaldo = sub.add_parser("aguinaldo", help="Year-end bonus")
    aguinaldo.add_argument("daily", type=amount, help="Daily salary")
    aguinaldo.add_argument("--tenure", type=amount, default=Decimal("1"), help="Years of service")
    aguinaldo.add_argument("--days", type=amount, default=Decimal(PAYROLL_CONSTANTS.aguinaldo_days_default))
    aguinaldo.set_defaults(func=cmd_aguinaldo)

    finiquito = sub.add_parser("finiquito", help="Termination settlement")
    finiquito.add_argument("daily", type=amount, help="Daily salary")
    finiquito.add_argument("--pending", type=amount, default=Decimal("0"), help="Pending days to pay")
    finiquito.add_argument("--vacations", type=amount, default=Decimal("0"), help="Unused vacation days")
    finiquito.add_argument(
        "--bonus-pct", type=amount, default=Decimal(str(PAYROLL_CONSTANTS.vacation_bonus_percentage))
    )
    group = finiquito.add_mutually_exclusive_group()
    group.add_argument("--aguinaldo", type=amount, default=Decimal("0"), help="Prorated aguinaldo amount")
    group.add_argument("--aguinaldo-days-worked", type=amount, help="Prorate a full-year aguinaldo over these days")
    finiquito.add_argument("--tenure", type=amount, default=Decimal("1"), help="Years of service for proration")
    finiquito.set_defaults(func=cmd_finiquito)

    daily = sub.add_parser("daily-salary", help="Daily salary from an hourly rate")
    daily.add_argument("rate", type=amount)
    daily.add_argument("--hours-per-day", type=amount, default=Decimal(PAYROLL_CONSTANTS.regular_hours_daily))
    daily.set_defaults(func=cmd_daily_salary)

    monthly = sub.add_parser("monthly-salary", help="Monthly salary from a daily salary")
    monthly.add_argument("daily", type=amount)
    monthly.add_argument("--days-per-month", type=amount, default=Decimal(PAYROLL_CONSTANTS.days_per_month))
    monthly.set_defaults(func=cmd_monthly_salary)

    fmt = sub.add_parser("format", help="Format an amount as currency")
    fmt.add_argument("amount", type=amount)
    fmt.add_argument("--currency")
    fmt.add_argument("--locale")
    fmt.set_defaults(func=cmd_format)

    estimate = sub.add_parser("estimate", help="Estimate a week's pay from an attendance CSV")
    estimate.add_argument("path")
    estimate.add_argument("employee")
    estimate.add_argument("anchor", type=parse_date, help="Any date in the week to estimate")
    estimate.add_argument("--salary-type", default="daily", choices=SALARY_TYPES)
    estimate.add_argument("--daily", type=amount, default=Decimal("0"), help="Daily salary")
    estimate.add_argument("--rate", type=amount, default=Decimal("0"), help="Hourly rate")
    estimate.set_defaults(func=cmd_estimate)

    batch = sub.add_parser("batch", help="Weekly pay preview for a JSON list of employees")
    batch.add_argument("path")
    batch.set_defaults(func=cmd_batch)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging(get_settings().log_level)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from None
    except NominaError as exc:
        logger.info("calculation_rejected", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from None


if __name__ == "__main__":
    main()
