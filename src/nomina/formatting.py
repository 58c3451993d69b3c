from __future__ import annotations

from typing import Any

from babel.core import UnknownLocaleError
from babel.numbers import format_currency as babel_format_currency

from .logging import get_logger
from .money import is_number, to_decimal

logger = get_logger(__name__)

ZERO_DISPLAY = "$0.00"


def format_currency(amount: Any, currency: str = "MXN", locale: str = "es-MX") -> str:
    """Render ``amount`` for display. Never raises.

    Anything that is not a finite number renders as ``$0.00``. If the locale
    cannot be used the amount falls back to ``$`` plus two fixed decimals.
    """
    if not is_number(amount):
        return ZERO_DISPLAY

    value = to_decimal(amount)
    try:
        return babel_format_currency(
            value,
            currency,
            locale=locale.replace("-", "_"),
            currency_digits=False,
        )
    except (UnknownLocaleError, ValueError, TypeError, AttributeError, ArithmeticError) as exc:
        logger.warning("currency_format_fallback", currency=currency, locale=locale, error=str(exc))
        return f"${value:.2f}"


def format_hours(value: Any) -> str:
    if not is_number(value):
        return "0.00 hrs"
    return f"{to_decimal(value):.2f} hrs"
