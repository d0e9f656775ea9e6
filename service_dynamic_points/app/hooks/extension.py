"""
Dynamic points hook extension.
"""

from typing import Any, Dict, List, Optional, Tuple

from shared.logging import get_logger
from ..args.models import EventArgs
from ..args.resolver import ArgResolver
from ..rounding.registry import RoundingMethodRegistry
from ..rules.calculator import PointsCalculator
from ..rules.models import HookFire, Reaction, ValidationIssue
from ..rules.validator import ReactionValidator, SettingsValidator
from .filters import PointsToAwardFilters
from .store import ReactionStore


class DynamicPointsExtension:
    """Awards points calculated from an event arg instead of a fixed amount.

    The extension never stops a reaction from hitting; it only supplies the
    number of points when nothing else has.
    """

    def __init__(
        self,
        settings_validator: SettingsValidator,
        calculator: PointsCalculator,
        rounding_methods: RoundingMethodRegistry,
        reactions: ReactionStore,
        resolver: ArgResolver,
        slug: str = "dynamic_points"
    ):
        self.slug = slug
        self.settings_validator = settings_validator
        self.calculator = calculator
        self.rounding_methods = rounding_methods
        self.reactions = reactions
        self.resolver = resolver
        self.logger = get_logger("dynamic_points.extension")

    def register(self, filters: PointsToAwardFilters, priority: int = 10):
        """Hook the points calculation into the points-to-award filters."""
        filters.add_filter(self.compute_award_to_filter, priority)

    def validate(
        self,
        settings: Any,
        validator: ReactionValidator,
        event_args: EventArgs
    ) -> Tuple[Optional[Dict[str, Any]], List[ValidationIssue]]:
        """Validate settings, with errors tagged under this extension's slug."""
        validator.push_field(self.slug)
        try:
            return self.settings_validator.validate(settings, validator, event_args)
        finally:
            validator.pop_field()

    def should_apply(self, fire: HookFire) -> bool:
        return True

    def describe_configuration(self) -> Dict[str, Any]:
        """Labels and rounding method titles for the reaction editor."""
        rounding_methods = {
            key: method.get_title()
            for key, method in self.rounding_methods.get_all().items()
        }

        return {
            "arg_label": "Calculate Points Based On",
            "multiply_by_label": "Multiply By",
            "rounding_method_label": "Rounding Method",
            "rounding_methods": rounding_methods,
            "min_label": "Minimum",
            "max_label": "Maximum",
        }

    def compute_award_to_filter(self, points: int, fire: HookFire) -> int:
        """Filters the number of points to award.

        Points already set by something else are left alone.
        """
        if points:
            return points

        settings = self.reactions.get_meta(fire.reaction_id, self.slug)

        if not settings:
            return points

        return self.calculator.compute(settings, fire)

    def get_points_label(
        self,
        label: Optional[str],
        reaction: Reaction,
        event_args: EventArgs
    ) -> Optional[str]:
        """The points column text for a reaction in a "how to get points" listing."""
        if label:
            return label

        settings = reaction.meta.get(self.slug)

        if not settings:
            return label

        titles = self.resolver.get_titles(event_args, settings.get("arg") or ())

        if not titles:
            return "Dynamic"

        return "Calculated from {}".format(" » ".join(titles))
