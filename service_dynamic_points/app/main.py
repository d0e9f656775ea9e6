"""
Dynamic points service.
"""

from typing import Dict

from fastapi import Body

from shared.base_service import BaseService
from shared.errors import NotFoundError, SettingsValidationError, ValidationError
from shared.logging import set_reaction_context

from .args.models import EventArgs
from .args.resolver import ArgHierarchyResolver
from .hooks.extension import DynamicPointsExtension
from .hooks.filters import PointsToAwardFilters
from .hooks.store import ReactionStore
from .rounding.registry import create_default_registry
from .rules.calculator import PointsCalculator
from .rules.models import (
    HookFire, Reaction,
    SettingsValidateRequest, SettingsValidateResponse, ValidationIssueModel,
    ReactionSaveRequest, ReactionResponse,
    AwardRequest, AwardResponse, PointsLabelResponse
)
from .rules.validator import ReactionValidator, SettingsValidator


class DynamicPointsService(BaseService):
    """Dynamic points service implementation."""

    def __init__(self):
        super().__init__("dynamic_points", 8020)

        # Initialize components
        self.rounding_methods = create_default_registry()
        self.resolver = ArgHierarchyResolver()
        self.reactions = ReactionStore()
        self.filters = PointsToAwardFilters()
        self.event_args: Dict[str, EventArgs] = {}

        self.extension = DynamicPointsExtension(
            settings_validator=SettingsValidator(self.rounding_methods, self.resolver),
            calculator=PointsCalculator(self.rounding_methods, self.resolver),
            rounding_methods=self.rounding_methods,
            reactions=self.reactions,
            resolver=self.resolver,
            slug=self.config.meta_key
        )
        self.extension.register(self.filters, self.config.award_filter_priority)

        self._setup_dynamic_points_routes()

    def _parse_event_args(self, data: Dict) -> EventArgs:
        try:
            return EventArgs.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ValidationError("Event args do not match expected format", {"error": str(e)})

    def _validate(self, settings, event_args: EventArgs) -> SettingsValidateResponse:
        validator = ReactionValidator()
        result, errors = self.extension.validate(settings, validator, event_args)

        valid = result is not None and not errors
        self.metrics.record_validation(valid)

        return SettingsValidateResponse(
            valid=valid,
            settings=result,
            errors=[ValidationIssueModel(**error.to_dict()) for error in errors]
        )

    def _get_reaction(self, reaction_id: str) -> Reaction:
        reaction = self.reactions.get_reaction(reaction_id)

        if reaction is None:
            raise NotFoundError("Reaction not found", {"reaction_id": reaction_id})

        return reaction

    def _setup_dynamic_points_routes(self):
        """Set up dynamic points routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "dynamic_points",
                "message": "Dynamic Points Service",
                "version": "1.0.0",
                "rounding_methods": list(self.rounding_methods.get_all().keys())
            }

        @self.app.get("/dynamic-points/config")
        async def get_config():
            """Labels and rounding methods for the reaction editor."""
            return self.extension.describe_configuration()

        @self.app.post("/dynamic-points/validate", response_model=SettingsValidateResponse)
        async def validate(request: SettingsValidateRequest):
            """Validate dynamic points settings without saving them."""
            event_args = self._parse_event_args(request.event_args)
            return self._validate(request.settings, event_args)

        @self.app.put("/reactions/{reaction_id}", response_model=ReactionResponse)
        async def save_reaction(reaction_id: str, request: ReactionSaveRequest = Body(...)):
            """Create or replace a reaction with dynamic points settings."""
            set_reaction_context(reaction_id)
            event_args = self._parse_event_args(request.event_args)

            meta = {}

            if request.dynamic_points is not None:
                validation = self._validate(request.dynamic_points, event_args)

                if not validation.valid:
                    raise SettingsValidationError(
                        [error.model_dump(mode="json") for error in validation.errors]
                    )

                meta[self.extension.slug] = validation.settings

            self.event_args[request.event_slug] = event_args
            reaction = self.reactions.add_reaction(Reaction(
                reaction_id=reaction_id,
                event_slug=request.event_slug,
                meta=meta
            ))

            return ReactionResponse(
                reaction_id=reaction.reaction_id,
                event_slug=reaction.event_slug,
                meta=reaction.meta
            )

        @self.app.get("/reactions/{reaction_id}", response_model=ReactionResponse)
        async def get_reaction(reaction_id: str):
            """Get a stored reaction."""
            reaction = self._get_reaction(reaction_id)

            return ReactionResponse(
                reaction_id=reaction.reaction_id,
                event_slug=reaction.event_slug,
                meta=reaction.meta
            )

        @self.app.post("/reactions/{reaction_id}/award", response_model=AwardResponse)
        async def compute_award(reaction_id: str, request: AwardRequest):
            """Compute the points a fire of the reaction awards."""
            set_reaction_context(reaction_id)
            reaction = self._get_reaction(reaction_id)

            fire = HookFire(
                event_args=self.event_args.get(reaction.event_slug, EventArgs()),
                reaction_id=reaction_id,
                values=request.values
            )

            with self.metrics.time_award_computation():
                points = request.points
                if self.extension.should_apply(fire):
                    points = self.filters.apply(request.points, fire)

            if request.points:
                outcome = "preset"
            elif points:
                outcome = "computed"
            else:
                outcome = "zero"
            self.metrics.record_award(outcome)

            self.logger.info(
                "Award computed",
                reaction_id=reaction_id,
                points=points,
                outcome=outcome
            )

            return AwardResponse(reaction_id=reaction_id, points=points)

        @self.app.get("/reactions/{reaction_id}/points-label", response_model=PointsLabelResponse)
        async def get_points_label(reaction_id: str):
            """The points column text for the reaction in a how-to-get-points listing."""
            reaction = self._get_reaction(reaction_id)

            label = self.extension.get_points_label(
                None,
                reaction,
                self.event_args.get(reaction.event_slug, EventArgs())
            )

            return PointsLabelResponse(reaction_id=reaction_id, label=label)


def create_app():
    """Create the FastAPI application."""
    service = DynamicPointsService()
    return service.app


if __name__ == "__main__":
    service = DynamicPointsService()
    service.run()
