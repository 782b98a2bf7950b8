"""Lenient money and hours parsing for values arriving from edit forms."""

from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")


def parse_decimal(value: Any) -> Decimal:
    """Return ``value`` as a finite ``Decimal``, or zero when it cannot be read as one.

    Half-typed input (``""``, ``"12a"``, ``None``) and non-finite numbers
    (NaN, infinity) yield zero rather than an exception.
    """
    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            return ZERO
    if not number.is_finite():
        return ZERO
    return number
