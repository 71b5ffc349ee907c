from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from fractions import Fraction
from typing import Any

from beautypro.application.exceptions import ValidationError


CENTS = Decimal("0.01")
LOYALTY_BASE = 10


def parse_amount(value: Any, field: str, allow_negative: bool = False) -> Decimal:
    """
    Parse a price-like form value into a Decimal.

    Accepts numbers and numeric strings, with either "." or "," as the
    decimal separator ("12,50" is 12.50). Booleans, NaN, infinities and
    anything non-numeric raise ValidationError.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(field, "must be a number")
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value).strip().replace(",", ".")
        if not text:
            raise ValidationError(field, "must be a number")
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise ValidationError(field, f"not a number: {value!r}") from None
    if not amount.is_finite():
        raise ValidationError(field, f"not a number: {value!r}")
    if amount < 0 and not allow_negative:
        raise ValidationError(field, "must not be negative")
    return amount


def parse_minutes(value: Any, field: str = "duration_minutes") -> int:
    amount = parse_amount(value, field)
    if amount != amount.to_integral_value() or amount == 0:
        raise ValidationError(field, "must be a positive whole number of minutes")
    return int(amount)


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def points_divisor(points_per_currency: Decimal) -> Fraction:
    """10 / points_per_currency, or 10 when the ratio is zero or negative."""
    ratio = Fraction(points_per_currency)
    if ratio > 0:
        return Fraction(LOYALTY_BASE) / ratio
    return Fraction(LOYALTY_BASE)


def accrued_points(value: Decimal, points_per_currency: Decimal) -> int:
    # Exact rational arithmetic: 10 / 7 as a Decimal would round and floor() could lose a point.
    return math.floor(Fraction(value) / points_divisor(points_per_currency))
