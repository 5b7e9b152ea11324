"""
Catalog of validation rules for numeric values.
"""

import math
from decimal import Decimal
from typing import Any

from dataguard.core.models import ValidationRule

# Largest integer a double represents exactly: 2**53 - 1
MAX_SAFE_INTEGER = 9007199254740991
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


def format_number(value: Any) -> str:
    """
    Render a number for messages the way JavaScript's ``String(number)`` does.

    Integral floats drop the trailing ``.0``. Magnitudes from 1e21 upwards and
    below 1e-6 switch to exponent notation (``1e+21``, ``1.5e-7``).

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(1e21)
        '1e+21'
        >>> format_number(0.0000001)
        '1e-7'
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if abs(value) < 10 ** 21:
            return str(value)
        try:
            value = float(value)
        except OverflowError:
            return "Infinity" if value > 0 else "-Infinity"
    if not isinstance(value, float):
        return str(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)

    # repr() gives the shortest digit string that round-trips
    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
    return f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_safe_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        if not value.is_integer():
            return False
    elif not isinstance(value, int):
        return False
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def _round_half_away_from_zero(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _is_currency(value: Any) -> bool:
    if not _is_number(value):
        return False
    if isinstance(value, int):
        return True
    if not math.isfinite(value):
        return False
    if value.is_integer():
        return True
    return _round_half_away_from_zero(value * 100) / 100 == value


# Zero passes: the rule checks for a non-negative value despite its name.
positive = ValidationRule(
    name="positive",
    predicate=lambda value: value >= 0,
    message="Number must be positive or zero",
)

integer = ValidationRule(
    name="integer",
    predicate=_is_safe_integer,
    message="Number must be a valid integer within safe integer limits",
)

currency = ValidationRule(
    name="currency",
    predicate=_is_currency,
    message="Invalid currency format (maximum 2 decimal places)",
)


def range(min: float, max: float) -> ValidationRule:
    """Rule requiring ``min <= value <= max`` (both ends inclusive)."""
    return ValidationRule(
        name="range",
        predicate=lambda value: min <= value <= max,
        message=f"Number must be between {format_number(min)} and {format_number(max)}",
    )


class NumberRules:
    """Namespace grouping the number rule catalog."""

    positive = positive
    integer = integer
    currency = currency
    range = staticmethod(range)
