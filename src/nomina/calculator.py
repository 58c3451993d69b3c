from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from .errors import InvalidArgument
from .logging import get_logger
from .models import (
    AguinaldoInput,
    AguinaldoResult,
    FiniquitoInput,
    FiniquitoResult,
    WeeklyPayInput,
    WeeklyPayResult,
)
from .money import defensive_sum, non_negative, round_money

logger = get_logger(__name__)

HALF_DAY = Decimal("0.5")


def compute_weekly_pay(request: Optional[WeeklyPayInput] = None, **fields: Any) -> WeeklyPayResult:
    """Pay for one period: regular hours, overtime at ``overtime_factor``, bonuses and deductions.

    Every monetary field is rounded on its own. ``gross_pay`` is rounded from the
    unrounded components, so it can differ by a cent from adding the rounded parts.
    """
    request = request or WeeklyPayInput(**fields)

    regular_pay = request.hours * request.hourly_rate
    overtime_pay = request.overtime_hours * request.hourly_rate * request.overtime_factor
    total_bonuses = defensive_sum(request.bonuses)
    total_deductions = defensive_sum(request.deductions)
    gross_pay = regular_pay + overtime_pay + total_bonuses
    # no floor: deductions larger than gross give a negative net
    net_pay = gross_pay - total_deductions

    result = WeeklyPayResult(
        hourly_rate=request.hourly_rate,
        hours=request.hours,
        overtime_hours=request.overtime_hours,
        regular_pay=round_money(regular_pay),
        overtime_pay=round_money(overtime_pay),
        total_bonuses=round_money(total_bonuses),
        total_deductions=round_money(total_deductions),
        gross_pay=round_money(gross_pay),
        net_pay=round_money(net_pay),
    )
    logger.debug("weekly_pay_computed", gross_pay=str(result.gross_pay), net_pay=str(result.net_pay))
    return result


def compute_aguinaldo(request: Optional[AguinaldoInput] = None, **fields: Any) -> AguinaldoResult:
    """Year-end bonus: base days plus half a day per completed year of service."""
    request = request or AguinaldoInput(**fields)

    base_days = request.days_per_year
    # only whole years count: 2.7 years earns 1.0 extra day, not 1.35
    additional_days = Decimal(int(request.tenure_years)) * HALF_DAY
    total_days = base_days + additional_days
    aguinaldo_amount = request.daily_salary * total_days

    result = AguinaldoResult(
        daily_salary=request.daily_salary,
        tenure_years=request.tenure_years,
        base_days=base_days,
        additional_days=round_money(additional_days),
        total_days=round_money(total_days),
        aguinaldo_amount=round_money(aguinaldo_amount),
    )
    logger.debug("aguinaldo_computed", total_days=str(result.total_days), amount=str(result.aguinaldo_amount))
    return result


def compute_finiquito(request: Optional[FiniquitoInput] = None, **fields: Any) -> FiniquitoResult:
    """Termination settlement.

    ``proportional_aguinaldo`` is an amount the caller already prorated; the
    aguinaldo rules are not re-applied here.
    """
    request = request or FiniquitoInput(**fields)

    pending_pay = request.pending_days * request.daily_salary
    vacation_pay = request.vacations * request.daily_salary
    vacation_bonus = vacation_pay * request.vacation_bonus_pct
    total = pending_pay + vacation_pay + vacation_bonus + request.proportional_aguinaldo

    result = FiniquitoResult(
        daily_salary=request.daily_salary,
        pending_days=request.pending_days,
        vacations=request.vacations,
        vacation_bonus_pct=request.vacation_bonus_pct,
        proportional_aguinaldo=request.proportional_aguinaldo,
        pending_pay=round_money(pending_pay),
        vacation_pay=round_money(vacation_pay),
        vacation_bonus=round_money(vacation_bonus),
        total_finiquito=round_money(total),
    )
    logger.debug("finiquito_computed", total=str(result.total_finiquito))
    return result


def prorate_aguinaldo(aguinaldo_amount: Any, days_worked: Any, days_in_year: Any = 365) -> Decimal:
    """Share of a full-year aguinaldo earned over ``days_worked``."""
    amount = non_negative(aguinaldo_amount, "aguinaldo_amount", "Aguinaldo amount")
    worked = non_negative(days_worked, "days_worked", "Days worked")
    year = non_negative(days_in_year, "days_in_year", "Days in year")
    if year == 0:
        raise InvalidArgument("days_in_year", days_in_year, "Days in year", "a positive number")
    return round_money(amount * worked / year)
