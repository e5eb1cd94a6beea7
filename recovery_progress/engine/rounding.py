"""Decimal rounding used by the calculations."""

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal]

_WHOLE = Decimal("1")


def to_decimal(value: Number) -> Decimal:
    """Convert without picking up binary float noise (0.1 stays 0.1)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_half_up(value: Number) -> Decimal:
    """Round to a whole number, halves away from zero."""
    return to_decimal(value).quantize(_WHOLE, rounding=ROUND_HALF_UP)


def ceil_int(value: Number) -> int:
    return int(to_decimal(value).to_integral_value(rounding=ROUND_CEILING))


def percent_of(part: Number, whole: Number) -> int:
    """part / whole as a whole percent, clamped to [0, 100]."""
    percent = int(round_half_up(to_decimal(part) * 100 / to_decimal(whole)))
    return max(0, min(100, percent))
