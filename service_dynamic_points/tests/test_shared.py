"""
Unit tests for shared configuration and errors.
"""

import pytest

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared.config import get_config
from shared.errors import (
    DynamicPointsException, NotFoundError, SettingsValidationError, ValidationError
)


class TestConfig:
    """Test cases for service configuration."""

    def test_defaults(self):
        """Test default configuration values."""
        config = get_config("dynamic_points", 8020)

        assert config.service_name == "dynamic_points"
        assert config.port == 8020
        assert config.meta_key == "dynamic_points"
        assert config.award_filter_priority == 10
        assert config.log_level == "info"

    def test_environment_override(self, monkeypatch):
        """Test that settings are read from the environment."""
        monkeypatch.setenv("DYNAMIC_POINTS_AWARD_FILTER_PRIORITY", "20")
        monkeypatch.setenv("DYNAMIC_POINTS_LOG_LEVEL", "debug")

        config = get_config("dynamic_points", 8020)

        assert config.award_filter_priority == 20
        assert config.log_level == "debug"


class TestErrors:
    """Test cases for error types."""

    def test_to_response(self):
        """Test converting an exception to an error response."""
        error = ValidationError("Bad input", {"field": "arg"})

        response = error.to_response("req-1")

        assert response.code == "VALIDATION_ERROR"
        assert response.message == "Bad input"
        assert response.details == {"field": "arg"}
        assert response.request_id == "req-1"

    def test_settings_validation_error(self):
        """Test that issues are carried in the details."""
        issues = [{"code": "min_invalid", "message": "Bad min.", "field": ["dynamic_points", "min"]}]

        error = SettingsValidationError(issues)

        assert error.code == "SETTINGS_VALIDATION_ERROR"
        assert error.errors == issues
        assert error.details == {"errors": issues}
        assert error.status_code == 400

    def test_not_found_status(self):
        """Test the not found status code."""
        error = NotFoundError()

        assert isinstance(error, DynamicPointsException)
        assert error.status_code == 404

    def test_raise(self):
        """Test that errors are raisable exceptions."""
        with pytest.raises(DynamicPointsException) as exc_info:
            raise ValidationError()

        assert str(exc_info.value) == "Validation failed"
