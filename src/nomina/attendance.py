from __future__ import annotations

import csv
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

from .constants import PAYROLL_CONSTANTS
from .errors import DataFileError
from .logging import get_logger
from .money import ZERO, is_number, non_negative, round_money, to_decimal

logger = get_logger(__name__)

SALARY_TYPES = ("daily", "hourly", "project")


def week_bounds(anchor: date) -> Tuple[date, date]:
    """Monday..Sunday week containing ``anchor``."""
    start = anchor - timedelta(days=anchor.weekday())
    end = start + timedelta(days=6)
    return start, end


def _hours(value: Any) -> Decimal:
    return to_decimal(value) if is_number(value) else ZERO


@dataclass
class AttendanceRecord:
    worked_date: date
    total_hours: Any = 0
    overtime_hours: Any = 0
    clock_in: Optional[str] = None
    clock_out: Optional[str] = None

    @property
    def worked(self) -> bool:
        return bool(self.clock_in) or _hours(self.total_hours) > 0


@dataclass
class SalaryProfile:
    employee_id: str
    salary_type: str = "daily"
    daily_salary: Any = 0
    hourly_rate: Any = 0

    def __post_init__(self) -> None:
        # anything other than hourly is paid per worked day, like "project"
        self.salary_type = (self.salary_type or "daily").lower()
        self.daily_salary = non_negative(self.daily_salary, "daily_salary", "Daily salary")
        self.hourly_rate = non_negative(self.hourly_rate, "hourly_rate", "Hourly rate")


@dataclass
class WeeklyEstimate:
    employee_id: str
    week_start: date
    week_end: date
    salary_type: str
    worked_days: int
    regular_hours: Decimal
    overtime_hours: Decimal
    base_pay: Decimal
    overtime_pay: Decimal
    bonuses: Decimal = ZERO
    deductions: Decimal = ZERO
    gross_total: Decimal = ZERO
    net_total: Decimal = ZERO
    records: List[AttendanceRecord] = field(default_factory=list, repr=False)


def estimate_weekly_pay(
    profile: SalaryProfile,
    records: Iterable[AttendanceRecord],
    start: date,
    end: date,
) -> WeeklyEstimate:
    """Estimate a week's pay from attendance, without bonuses or deductions.

    Daily and project staff are paid per worked day and their overtime is
    priced from the daily salary spread over a regular day.
    """
    in_range = sorted((r for r in records if start <= r.worked_date <= end), key=lambda r: r.worked_date)
    worked_days = sum(1 for r in in_range if r.worked)
    regular_hours = sum((_hours(r.total_hours) for r in in_range), ZERO)
    overtime_hours = sum((_hours(r.overtime_hours) for r in in_range), ZERO)

    factor = Decimal(str(PAYROLL_CONSTANTS.overtime_factor))
    if profile.salary_type == "hourly":
        base_pay = regular_hours * profile.hourly_rate
        overtime_pay = overtime_hours * profile.hourly_rate * factor
    else:
        hourly_equivalent = profile.daily_salary / PAYROLL_CONSTANTS.regular_hours_daily
        base_pay = profile.daily_salary * worked_days
        overtime_pay = overtime_hours * hourly_equivalent * factor

    gross = base_pay + overtime_pay
    estimate = WeeklyEstimate(
        employee_id=profile.employee_id,
        week_start=start,
        week_end=end,
        salary_type=profile.salary_type,
        worked_days=worked_days,
        regular_hours=regular_hours,
        overtime_hours=overtime_hours,
        base_pay=round_money(base_pay),
        overtime_pay=round_money(overtime_pay),
        gross_total=round_money(gross),
        net_total=round_money(gross),
        records=in_range,
    )
    logger.debug(
        "weekly_estimate_computed",
        employee_id=profile.employee_id,
        worked_days=worked_days,
        gross_total=str(estimate.gross_total),
    )
    return estimate


def _cell(value: Optional[str]) -> Any:
    if value is None or not value.strip():
        return 0
    try:
        return Decimal(value.strip())
    except ArithmeticError:
        # malformed hour cells count as zero, like any other non-numeric value
        return 0


def load_attendance_csv(path: Path) -> List[AttendanceRecord]:
    records: List[AttendanceRecord] = []
    with path.open(newline="") as handle:
        reader = csv.DictReader(handle)
        if "date" not in (reader.fieldnames or ()):
            raise DataFileError(path, "missing 'date' column")
        for line, row in enumerate(reader, start=2):
            try:
                worked_date = date.fromisoformat(row["date"] or "")
            except ValueError:
                raise DataFileError(path, f"line {line}: date {row['date']!r} is not YYYY-MM-DD") from None
            records.append(
                AttendanceRecord(
                    worked_date=worked_date,
                    total_hours=_cell(row.get("total_hours")),
                    overtime_hours=_cell(row.get("overtime_hours")),
                    clock_in=row.get("clock_in") or None,
                    clock_out=row.get("clock_out") or None,
                )
            )
    return records
