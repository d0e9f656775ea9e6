"""
Rounding methods for reducing a dynamic points value to an integer.
"""

from abc import ABC, abstractmethod
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, localcontext
from typing import Any

from ..numbers import is_integral, precision_for, to_decimal


class RoundingMethod(ABC):
    """Base interface for rounding methods.

    Rounding methods are stateless; one instance is shared by every reaction
    that references its key.
    """

    rounding: str = ROUND_HALF_UP

    def __init__(self, key: str):
        self.key = key

    @abstractmethod
    def get_title(self) -> str:
        """Return a human-readable title for the configuration UI."""
        pass

    def round(self, value: Any) -> int:
        """Round a number (int, float, Decimal or numeric string) to an int.

        Raises:
            ValueError: If the value is not numeric.
        """
        number = to_decimal(value)

        if number is None:
            raise ValueError(f"Cannot round non-numeric value: {value!r}")

        if is_integral(number):
            return int(number)

        with localcontext() as ctx:
            ctx.prec = precision_for(number)
            ctx.rounding = self.rounding
            return int(number.to_integral_value())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


class NearestRoundingMethod(RoundingMethod):
    """Rounds to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""

    rounding = ROUND_HALF_UP

    def get_title(self) -> str:
        return "Nearest whole number"


class UpRoundingMethod(RoundingMethod):
    """Rounds up to the ceiling (4.3 -> 5, -4.3 -> -4)."""

    rounding = ROUND_CEILING

    def get_title(self) -> str:
        return "Round up"


class DownRoundingMethod(RoundingMethod):
    """Rounds down to the floor (4.7 -> 4, -4.3 -> -5)."""

    rounding = ROUND_FLOOR

    def get_title(self) -> str:
        return "Round down"
