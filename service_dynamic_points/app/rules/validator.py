"""
Settings validation for dynamic points.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from shared.logging import get_logger
from ..args.models import AttrDataType, EventArgs
from ..args.resolver import ArgResolver
from ..numbers import is_integral, to_decimal, to_int
from ..rounding.registry import RoundingMethodRegistry
from .models import SettingsErrorCode, ValidationIssue

OPTIONAL_FIELDS = ("rounding_method", "multiply_by", "min", "max")


class ReactionValidator:
    """Collects validation errors, tagging each with the current field path.

    A validator is created per validation request. Callers push a field before
    validating the value under it and pop it afterwards, so that every error
    records where it came from, e.g. ``["dynamic_points", "max"]``.
    """

    def __init__(self, field_stack: Optional[List[str]] = None):
        self._field_stack: List[str] = list(field_stack or [])
        self._errors: List[ValidationIssue] = []

    def push_field(self, field: str):
        self._field_stack.append(field)

    def pop_field(self):
        self._field_stack.pop()

    def get_field_stack(self) -> List[str]:
        return list(self._field_stack)

    def add_error(self, code: SettingsErrorCode, message: str, field: Optional[str] = None):
        """Record an error at the current field path, or at a subfield of it."""
        path = self.get_field_stack()
        if field is not None:
            path.append(field)

        self._errors.append(ValidationIssue(code=code, message=message, field=path))

    def get_errors(self) -> List[ValidationIssue]:
        return list(self._errors)

    def had_errors(self) -> bool:
        return len(self._errors) > 0


class SettingsValidator:
    """Validates the dynamic points settings of a reaction.

    A missing or unusable ``arg`` is fatal and the whole entry is discarded.
    Problems with any other field only strip that field; validation goes on
    and the rest of the entry is returned alongside the errors.
    """

    def __init__(self, rounding_methods: RoundingMethodRegistry, resolver: ArgResolver):
        self.rounding_methods = rounding_methods
        self.resolver = resolver
        self.logger = get_logger("dynamic_points.settings_validator")

    def validate(
        self,
        settings: Any,
        validator: ReactionValidator,
        event_args: EventArgs
    ) -> Tuple[Optional[Dict[str, Any]], List[ValidationIssue]]:
        """Validate raw settings.

        Returns:
            The validated settings (None if a fatal error occurred) and the
            errors recorded during this call.
        """
        errors_before = len(validator.get_errors())

        result = self._validate(settings, validator, event_args)

        errors = validator.get_errors()[errors_before:]

        self.logger.debug(
            "Validated dynamic points settings",
            discarded=result is None,
            error_codes=[error.code.value for error in errors]
        )

        return result, errors

    def _validate(
        self,
        settings: Any,
        validator: ReactionValidator,
        event_args: EventArgs
    ) -> Optional[Dict[str, Any]]:

        if not isinstance(settings, Mapping):
            validator.add_error(
                SettingsErrorCode.FORMAT_MISMATCH,
                "Dynamic points settings do not match expected format."
            )
            return None

        if not settings.get("arg"):
            validator.add_error(
                SettingsErrorCode.ARG_MISSING,
                "You must specify an arg to calculate the points based on.",
                "arg"
            )
            return None

        # A null optional field means the field is not set
        settings = {
            key: value for key, value in settings.items()
            if value is not None or key not in OPTIONAL_FIELDS
        }

        validator.push_field("arg")
        try:
            arg_valid, requires_rounding = self._validate_arg(
                settings["arg"], validator, event_args
            )
        finally:
            validator.pop_field()

        if not arg_valid:
            return None

        if "rounding_method" in settings:
            if not self._validate_rounding_method(settings["rounding_method"], validator):
                del settings["rounding_method"]

        if "multiply_by" in settings:
            multiplier_valid, multiplier_requires_rounding = self._validate_multiply_by(
                settings["multiply_by"], validator
            )

            if not multiplier_valid:
                del settings["multiply_by"]
            elif multiplier_requires_rounding:
                requires_rounding = True

        self._validate_min_max(settings, validator)

        if requires_rounding and "rounding_method" not in settings:
            validator.add_error(
                SettingsErrorCode.ROUNDING_METHOD_REQUIRED,
                "A rounding method must be set when awarding dynamic points based on"
                " a decimal number value or multiplying by a decimal number."
            )

        return settings

    def _validate_arg(
        self,
        arg_hierarchy: Any,
        validator: ReactionValidator,
        event_args: EventArgs
    ) -> Tuple[bool, bool]:
        """Validate the arg hierarchy.

        Returns:
            Whether the arg is usable, and whether its values need rounding.
        """
        if not isinstance(arg_hierarchy, (list, tuple)) or not all(
            isinstance(slug, str) for slug in arg_hierarchy
        ):
            validator.add_error(
                SettingsErrorCode.FORMAT_MISMATCH,
                "Dynamic points settings do not match expected format."
            )
            return False, False

        arg = self.resolver.resolve(event_args, arg_hierarchy)

        if arg is None or not arg.is_attribute:
            validator.add_error(
                SettingsErrorCode.ARG_UNRESOLVABLE,
                "The specified arg does not exist or is not an attribute."
            )
            return False, False

        if arg.data_type == AttrDataType.INTEGER.value:
            return True, False

        if arg.data_type == AttrDataType.DECIMAL_NUMBER.value:
            return True, True

        validator.add_error(
            SettingsErrorCode.ARG_WRONG_TYPE,
            "Dynamic points cannot be awarded based on the specified attribute."
        )
        return False, False

    def _validate_rounding_method(self, rounding_method: Any, validator: ReactionValidator) -> bool:
        if not isinstance(rounding_method, str) or not self.rounding_methods.is_registered(rounding_method):
            validator.add_error(
                SettingsErrorCode.ROUNDING_METHOD_INVALID,
                "Invalid rounding method.",
                "rounding_method"
            )
            return False

        return True

    def _validate_multiply_by(self, multiply_by: Any, validator: ReactionValidator) -> Tuple[bool, bool]:
        """Validate the multiplier.

        Returns:
            Whether it is valid, and whether it is a non-integer.
        """
        number = to_decimal(multiply_by)

        if number is None or number == 0:
            validator.add_error(
                SettingsErrorCode.MULTIPLIER_INVALID,
                "Multiply by must be a number other than zero.",
                "multiply_by"
            )
            return False, False

        return True, not is_integral(number)

    def _validate_min_max(self, settings: Dict[str, Any], validator: ReactionValidator):
        minimum = maximum = None

        if "min" in settings:
            minimum = to_int(settings["min"])

            if minimum is None:
                validator.add_error(
                    SettingsErrorCode.MIN_INVALID,
                    "The minimum must be a whole number.",
                    "min"
                )
                del settings["min"]

        if "max" in settings:
            maximum = to_int(settings["max"])

            if maximum is None:
                validator.add_error(
                    SettingsErrorCode.MAX_INVALID,
                    "The maximum must be a whole number.",
                    "max"
                )
                del settings["max"]

            elif minimum is not None and minimum >= maximum:
                validator.add_error(
                    SettingsErrorCode.RANGE_INVALID,
                    "The maximum must be greater than the minimum.",
                    "max"
                )
                del settings["max"]
