from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Iterable, Optional, Union

from .errors import InvalidArgument

CENT = Decimal("0.01")
ZERO = Decimal("0")


def is_number(value: Any) -> bool:
    """True for finite ints, floats and Decimals. Booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, float):
        return value == value and value not in (float("inf"), float("-inf"))
    if isinstance(value, Decimal):
        return value.is_finite()
    return True


def to_decimal(value: Any, field: str = "value", label: Optional[str] = None) -> Decimal:
    if not is_number(value):
        raise InvalidArgument(field, value, label)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # repr gives the shortest string that round-trips, so 0.1 -> Decimal("0.1")
        return Decimal(repr(value))
    return Decimal(value)


def non_negative(value: Any, field: str, label: Optional[str] = None) -> Decimal:
    amount = to_decimal(value, field, label)
    if amount < 0:
        raise InvalidArgument(field, value, label)
    return amount


def round_money(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the two cents
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Numeric:
    amount: Decimal


@dataclass(frozen=True)
class Invalid:
    raw: Any


Entry = Union[Numeric, Invalid]


def coerce_entry(entry: Any) -> Entry:
    if is_number(entry):
        return Numeric(to_decimal(entry))
    return Invalid(entry)


def amount_of(entry: Entry) -> Decimal:
    if isinstance(entry, Numeric):
        return entry.amount
    return ZERO


def defensive_sum(entries: Optional[Iterable[Any]]) -> Decimal:
    """Sum a list of amounts, counting anything that is not a number as zero."""
    if not entries:
        return ZERO
    return sum((amount_of(coerce_entry(entry)) for entry in entries), ZERO)
