from __future__ import annotations

from decimal import Decimal
from typing import Any

from .constants import PAYROLL_CONSTANTS
from .errors import InvalidArgument
from .money import non_negative, round_money, to_decimal


def calculate_daily_salary(hourly_rate: Any, hours_per_day: Any = PAYROLL_CONSTANTS.regular_hours_daily) -> Decimal:
    rate = non_negative(hourly_rate, "hourly_rate", "Hourly rate")
    return round_money(rate * to_decimal(hours_per_day, "hours_per_day", "Hours per day"))


def calculate_monthly_salary(daily_salary: Any, days_per_month: Any = PAYROLL_CONSTANTS.days_per_month) -> Decimal:
    daily = non_negative(daily_salary, "daily_salary", "Daily salary")
    return round_money(daily * to_decimal(days_per_month, "days_per_month", "Days per month"))


def calculate_hourly_rate(daily_salary: Any, hours_per_day: Any = PAYROLL_CONSTANTS.regular_hours_daily) -> Decimal:
    """Hourly equivalent of a daily salary, the inverse of :func:`calculate_daily_salary`."""
    daily = non_negative(daily_salary, "daily_salary", "Daily salary")
    hours = to_decimal(hours_per_day, "hours_per_day", "Hours per day")
    if hours <= 0:
        raise InvalidArgument("hours_per_day", hours_per_day, "Hours per day", "a positive number")
    return round_money(daily / hours)
