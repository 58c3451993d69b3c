from .calculator import compute_aguinaldo, compute_finiquito, compute_weekly_pay, prorate_aguinaldo
from .constants import PAYROLL_CONSTANTS, CurrencyConfig, PolicyConstants, currency_config
from .errors import InvalidArgument, NominaError
from .formatting import format_currency
from .models import (
    AguinaldoInput,
    AguinaldoResult,
    FiniquitoInput,
    FiniquitoResult,
    WeeklyPayInput,
    WeeklyPayResult,
)
from .salary import calculate_daily_salary, calculate_hourly_rate, calculate_monthly_salary

__all__ = [
    "AguinaldoInput",
    "AguinaldoResult",
    "CurrencyConfig",
    "FiniquitoInput",
    "FiniquitoResult",
    "InvalidArgument",
    "NominaError",
    "PAYROLL_CONSTANTS",
    "PolicyConstants",
    "WeeklyPayInput",
    "WeeklyPayResult",
    "calculate_daily_salary",
    "calculate_hourly_rate",
    "calculate_monthly_salary",
    "compute_aguinaldo",
    "compute_finiquito",
    "compute_weekly_pay",
    "currency_config",
    "format_currency",
    "prorate_aguinaldo",
]
