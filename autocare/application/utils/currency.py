from __future__ import annotations

import math
from decimal import Decimal, DecimalException

from autocare.core.config import settings

MINOR_UNITS_PER_MAJOR = 100
# Largest exponent accepted for a major-unit amount (1e15 rupees).
MAX_AMOUNT_EXPONENT = 15


def format_price(amount: int, symbol: str | None = None) -> str:
    """Format a paise amount as whole rupees, e.g. 19900 -> "₹199"."""
    currency_symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    return f"{currency_symbol}{amount // MINOR_UNITS_PER_MAJOR}"


def to_minor_units(value: str | int | Decimal, ceiling: int | None = None) -> int:
    """
    Convert a major-unit amount ("150.50", 150, Decimal) to minor units.
    Fractions of a paisa are floored. With `ceiling`, larger amounts return `ceiling`.
    Raises ValueError for non-numeric or out-of-range input.
    """
    try:
        amount = Decimal(str(value).strip())
    except DecimalException as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    if ceiling is not None and amount >= Decimal(ceiling) / MINOR_UNITS_PER_MAJOR:
        return ceiling
    if not amount.is_zero() and amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise ValueError(f"Amount out of range: {value!r}")
    try:
        return math.floor(amount * MINOR_UNITS_PER_MAJOR)
    except DecimalException as e:
        raise ValueError(f"Amount out of range: {value!r}") from e
