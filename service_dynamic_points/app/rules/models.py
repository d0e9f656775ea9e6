"""
Data models for dynamic points settings, validation and fires.
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from ..args.models import EventArgs


class SettingsErrorCode(str, Enum):
    """Settings validation error codes."""
    # Fatal: the whole settings entry is discarded
    FORMAT_MISMATCH = "format_mismatch"
    ARG_MISSING = "arg_missing"
    ARG_UNRESOLVABLE = "arg_unresolvable"
    ARG_WRONG_TYPE = "arg_wrong_type"
    # Field-local: only the offending field is stripped
    ROUNDING_METHOD_INVALID = "rounding_method_invalid"
    ROUNDING_METHOD_REQUIRED = "rounding_method_required"
    MULTIPLIER_INVALID = "multiplier_invalid"
    MIN_INVALID = "min_invalid"
    MAX_INVALID = "max_invalid"
    RANGE_INVALID = "range_invalid"


FATAL_ERROR_CODES = frozenset({
    SettingsErrorCode.FORMAT_MISMATCH,
    SettingsErrorCode.ARG_MISSING,
    SettingsErrorCode.ARG_UNRESOLVABLE,
    SettingsErrorCode.ARG_WRONG_TYPE,
})


@dataclass
class ValidationIssue:
    """A validation error tagged with the field path it belongs to."""
    code: SettingsErrorCode
    message: str
    field: List[str] = field(default_factory=list)

    @property
    def is_fatal(self) -> bool:
        return self.code in FATAL_ERROR_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "message": self.message, "field": list(self.field)}


@dataclass
class HookFire:
    """One fire of an event for a reaction."""
    event_args: EventArgs
    reaction_id: str
    values: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Reaction:
    """A stored reaction and its metadata."""
    reaction_id: str
    event_slug: str
    meta: Dict[str, Any] = field(default_factory=dict)



class ValidationIssueModel(BaseModel):
    """API representation of a validation issue."""
    code: SettingsErrorCode
    message: str
    field: List[str] = Field(default_factory=list, description="Field path of the error")


class SettingsValidateRequest(BaseModel):
    """Request model for validating dynamic points settings."""
    event_args: Dict[str, Any] = Field(..., description="Arg hierarchy of the event")
    settings: Any = Field(None, description="Raw dynamic points settings")


class SettingsValidateResponse(BaseModel):
    """Response model for settings validation."""
    valid: bool
    settings: Optional[Dict[str, Any]] = Field(None, description="Validated settings, null if discarded")
    errors: List[ValidationIssueModel] = Field(default_factory=list)


class ReactionSaveRequest(BaseModel):
    """Request model for creating or replacing a reaction."""
    event_slug: str = Field(..., description="Event the reaction listens to")
    event_args: Dict[str, Any] = Field(..., description="Arg hierarchy of the event")
    dynamic_points: Any = Field(None, description="Raw dynamic points settings")


class ReactionResponse(BaseModel):
    """Response model for reaction operations."""
    reaction_id: str
    event_slug: str
    meta: Dict[str, Any]


class AwardRequest(BaseModel):
    """Request model for computing the award of a fire."""
    points: int = Field(0, description="Points already determined for this fire")
    values: Dict[str, Any] = Field(default_factory=dict, description="Entity values for this fire")


class AwardResponse(BaseModel):
    """Response model for an award computation."""
    reaction_id: str
    points: int


class PointsLabelResponse(BaseModel):
    """Response model for the how-to-get-points label."""
    reaction_id: str
    label: Optional[str]
