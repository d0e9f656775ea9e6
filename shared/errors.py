"""
Shared error handling for the Dynamic Points service.
"""

from typing import Dict, Any, List, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class DynamicPointsException(Exception):
    """Base exception for the Dynamic Points service."""

    status_code = 400

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, request_id: Optional[str] = None) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class ValidationError(DynamicPointsException):
    """Validation-related errors."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class SettingsValidationError(DynamicPointsException):
    """Dynamic points settings failed validation."""

    def __init__(self, errors: List[Dict[str, Any]], message: str = "Dynamic points settings are invalid"):
        self.errors = errors
        super().__init__("SETTINGS_VALIDATION_ERROR", message, {"errors": errors})


class NotFoundError(DynamicPointsException):
    """Requested object does not exist."""

    status_code = 404

    def __init__(self, message: str = "Not found", details: Optional[Dict[str, Any]] = None):
        super().__init__("NOT_FOUND", message, details)


class RegistryError(DynamicPointsException):
    """Registry-related errors."""

    def __init__(self, message: str = "Registry error", details: Optional[Dict[str, Any]] = None):
        super().__init__("REGISTRY_ERROR", message, details)


class DuplicateRegistrationError(RegistryError):
    """A key is already registered."""

    def __init__(self, key: str):
        super().__init__(f"'{key}' is already registered", {"key": key})
        self.code = "DUPLICATE_REGISTRATION"
