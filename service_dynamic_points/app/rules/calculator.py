"""
Calculates the number of points to award from a reaction's dynamic points settings.
"""

from decimal import localcontext
from typing import Any, Mapping

from shared.logging import get_logger
from ..args.resolver import ArgResolver
from ..numbers import is_integral, precision_for, to_decimal, to_int
from ..rounding.methods import RoundingMethod
from ..rounding.registry import RoundingMethodRegistry
from .models import HookFire


class PointsCalculator:
    """Turns an attribute value into an integer award.

    The calculation runs during live event processing and never raises:
    anything unresolvable or inconsistent yields 0 points.
    """

    def __init__(self, rounding_methods: RoundingMethodRegistry, resolver: ArgResolver):
        self.rounding_methods = rounding_methods
        self.resolver = resolver
        self.logger = get_logger("dynamic_points.calculator")

    def compute(self, settings: Mapping[str, Any], fire: HookFire) -> int:
        """Calculate the points value for a fire."""
        try:
            return self._compute(settings, fire)
        except Exception as e:
            self.logger.error(
                "Error calculating dynamic points",
                reaction_id=fire.reaction_id,
                error=str(e)
            )
            return 0

    def _compute(self, settings: Mapping[str, Any], fire: HookFire) -> int:
        arg = self.resolver.resolve(fire.event_args, settings.get("arg") or ())

        if arg is None:
            self.logger.warning(
                "Dynamic points arg not found",
                reaction_id=fire.reaction_id,
                arg=settings.get("arg")
            )
            return 0

        value = arg.get_value(fire.values)

        if _is_empty(value):
            return 0

        rounding_method = None

        if settings.get("rounding_method") is not None:
            rounding_method = self.rounding_methods.get(settings["rounding_method"])

            if not isinstance(rounding_method, RoundingMethod):
                self.logger.warning(
                    "Rounding method not registered",
                    reaction_id=fire.reaction_id,
                    rounding_method=settings["rounding_method"]
                )
                return 0

            if to_decimal(value) is None:
                return 0

            value = rounding_method.round(value)

        if settings.get("multiply_by") is not None:
            number = to_decimal(value)
            multiplier = to_decimal(settings["multiply_by"])

            if number is None or multiplier is None:
                return 0

            with localcontext() as ctx:
                ctx.prec = precision_for(number, multiplier)
                value = number * multiplier

            if not is_integral(value):
                if rounding_method is None:
                    self.logger.warning(
                        "Non-integer points value without a rounding method",
                        reaction_id=fire.reaction_id
                    )
                    return 0

                value = rounding_method.round(value)

        points = to_int(value)

        if points is None:
            return 0

        minimum = to_int(settings.get("min"))
        if minimum is not None and points < minimum:
            points = minimum

        maximum = to_int(settings.get("max"))
        if maximum is not None and points > maximum:
            points = maximum

        return points


def _is_empty(value: Any) -> bool:
    # Zero counts as empty: nothing to award, and min is not applied
    if value is None:
        return True
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, str) and value.strip() == "":
        return True
    number = to_decimal(value)
    return number is not None and number == 0
