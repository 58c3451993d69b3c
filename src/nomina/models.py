from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Tuple

from .constants import PAYROLL_CONSTANTS
from .money import non_negative


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class _Record:
    def to_dict(self) -> Dict[str, Any]:
        """Render with the camelCase keys used by the dashboard forms."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, tuple):
                value = list(value)
            out[_camel(f.name)] = value
        return out


def _normalise(record: Any, *names: Tuple[str, str]) -> None:
    for name, label in names:
        object.__setattr__(record, name, non_negative(getattr(record, name), name, label))


@dataclass(frozen=True)
class WeeklyPayInput(_Record):
    hourly_rate: Decimal = Decimal("0")
    hours: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")
    overtime_factor: Decimal = Decimal(str(PAYROLL_CONSTANTS.overtime_factor))
    bonuses: Tuple[Any, ...] = ()
    deductions: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        _normalise(
            self,
            ("hourly_rate", "Hourly rate"),
            ("hours", "Hours"),
            ("overtime_hours", "Overtime hours"),
            ("overtime_factor", "Overtime factor"),
        )
        # entries are kept raw; non-numeric ones count as zero when summed
        object.__setattr__(self, "bonuses", tuple(self.bonuses or ()))
        object.__setattr__(self, "deductions", tuple(self.deductions or ()))


@dataclass(frozen=True)
class WeeklyPayResult(_Record):
    hourly_rate: Decimal
    hours: Decimal
    overtime_hours: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    total_bonuses: Decimal
    total_deductions: Decimal
    gross_pay: Decimal
    net_pay: Decimal
    calculated_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True)
class AguinaldoInput(_Record):
    daily_salary: Decimal = Decimal("0")
    tenure_years: Decimal = Decimal("1")
    days_per_year: Decimal = Decimal(PAYROLL_CONSTANTS.aguinaldo_days_default)

    def __post_init__(self) -> None:
        _normalise(
            self,
            ("daily_salary", "Daily salary"),
            ("days_per_year", "Days per year"),
            ("tenure_years", "Tenure years"),
        )


@dataclass(frozen=True)
class AguinaldoResult(_Record):
    daily_salary: Decimal
    tenure_years: Decimal
    base_days: Decimal
    additional_days: Decimal
    total_days: Decimal
    aguinaldo_amount: Decimal
    calculated_at: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True)
class FiniquitoInput(_Record):
    daily_salary: Decimal = Decimal("0")
    pending_days: Decimal = Decimal("0")
    vacations: Decimal = Decimal("0")
    proportional_aguinaldo: Decimal = Decimal("0")
    vacation_bonus_pct: Decimal = Decimal(str(PAYROLL_CONSTANTS.vacation_bonus_percentage))

    def __post_init__(self) -> None:
        _normalise(
            self,
            ("daily_salary", "Daily salary"),
            ("pending_days", "Pending days"),
            ("vacations", "Vacation days"),
            ("vacation_bonus_pct", "Vacation bonus percentage"),
            ("proportional_aguinaldo", "Proportional aguinaldo"),
        )


@dataclass(frozen=True)
class FiniquitoResult(_Record):
    daily_salary: Decimal
    pending_days: Decimal
    vacations: Decimal
    vacation_bonus_pct: Decimal
    proportional_aguinaldo: Decimal
    pending_pay: Decimal
    vacation_pay: Decimal
    vacation_bonus: Decimal
    total_finiquito: Decimal
    calculated_at: datetime = field(default_factory=_now, compare=False)
