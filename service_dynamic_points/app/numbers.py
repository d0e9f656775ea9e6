"""
Numeric coercion helpers shared by the rounding methods, validator and calculator.

Values arrive from stored settings (JSON) and from entity attributes, so they
may be ints, floats, Decimals or numeric strings. Everything is converted to
Decimal through its string form so that 4.3 and "4.3" behave the same.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def to_decimal(value: Any) -> Optional[Decimal]:
    """Convert a value to a finite Decimal, or None if it is not numeric."""
    if isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None

    if not number.is_finite():
        return None

    return number


def is_integral(number: Decimal) -> bool:
    """Whether a Decimal has no fractional part."""
    return number == number.to_integral_value()


def to_int(value: Any) -> Optional[int]:
    """Convert a value to an int if it is numeric and integer-valued."""
    number = to_decimal(value)

    if number is None or not is_integral(number):
        return None

    return int(number)


def precision_for(*numbers: Decimal) -> int:
    """Decimal precision that holds the exact product of the given numbers."""
    digits = sum(len(number.as_tuple().digits) for number in numbers)
    return max(28, digits + 1)
