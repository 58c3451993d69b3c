from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import Settings, get_settings


@dataclass(frozen=True)
class PolicyConstants:
    """Statutory defaults used by the calculators (Mexican federal labor law)."""

    overtime_factor: float = 1.5
    double_time_factor: float = 2.0
    aguinaldo_days_default: int = 15
    vacation_bonus_percentage: float = 0.25  # prima vacacional
    regular_hours_weekly: int = 40
    regular_hours_daily: int = 8
    days_per_month: int = 30
    timezone: str = "America/Monterrey"  # informational


PAYROLL_CONSTANTS = PolicyConstants()


@dataclass(frozen=True)
class CurrencyConfig:
    code: str = "MXN"
    symbol: str = "$"
    locale: str = "es-MX"
    timezone: str = PAYROLL_CONSTANTS.timezone


def currency_config(settings: Optional[Settings] = None) -> CurrencyConfig:
    settings = settings or get_settings()
    return CurrencyConfig(code=settings.currency_code, locale=settings.locale, timezone=settings.timezone)
