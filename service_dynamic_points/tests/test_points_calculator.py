"""
Unit tests for the dynamic points calculator.
"""

import pytest
from decimal import Decimal
from unittest.mock import MagicMock

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared.test_helpers import TestDataFactory
from service_dynamic_points.app.args.resolver import ArgHierarchyResolver
from service_dynamic_points.app.rounding.registry import create_default_registry
from service_dynamic_points.app.rules.calculator import PointsCalculator


INT_ARG = ["test_entity", "int_attr"]
DECIMAL_ARG = ["test_entity", "decimal_number_attr"]


class TestPointsCalculator:
    """Test cases for PointsCalculator."""

    @pytest.fixture
    def rounding_methods(self):
        """Create the default rounding method registry."""
        return create_default_registry()

    @pytest.fixture
    def calculator(self, rounding_methods):
        """Create PointsCalculator instance."""
        return PointsCalculator(rounding_methods, ArgHierarchyResolver())

    def fire(self, **attrs):
        return TestDataFactory.create_fire(TestDataFactory.create_test_entity_values(**attrs))

    def test_calculate_integer(self, calculator):
        """Test that an integer value is awarded as is."""
        assert calculator.compute({"arg": INT_ARG}, self.fire(int_attr=3)) == 3

    def test_calculate_numeric_string(self, calculator):
        """Test that integer strings are accepted."""
        assert calculator.compute({"arg": INT_ARG}, self.fire(int_attr="7")) == 7

    def test_calculate_negative(self, calculator):
        """Test that negative values pass through."""
        assert calculator.compute({"arg": INT_ARG}, self.fire(int_attr=-4)) == -4

    @pytest.mark.parametrize("rounding_method,value,expected", [
        ("nearest", 4.5, 5),
        ("nearest", 4.4, 4),
        ("up", 4.3, 5),
        ("up", "4.3", 5),
        ("down", 4.7, 4),
        ("down", Decimal("4.999"), 4),
    ])
    def test_calculate_rounding(self, calculator, rounding_method, value, expected):
        """Test that decimal values are rounded."""
        settings = {"arg": DECIMAL_ARG, "rounding_method": rounding_method}

        assert calculator.compute(settings, self.fire(decimal_number_attr=value)) == expected

    def test_calculate_multiply_by_integer(self, calculator):
        """Test multiplying by an integer."""
        settings = {"arg": INT_ARG, "multiply_by": 5}

        assert calculator.compute(settings, self.fire(int_attr=3)) == 15

    def test_calculate_multiply_by_decimal(self, calculator):
        """Test that a fractional product is rounded half away from zero."""
        settings = {"arg": INT_ARG, "multiply_by": 0.5, "rounding_method": "nearest"}

        assert calculator.compute(settings, self.fire(int_attr=3)) == 2

    def test_calculate_multiply_by_decimal_integral_product(self, calculator):
        """Test a decimal multiplier whose product is whole."""
        settings = {"arg": INT_ARG, "multiply_by": "0.5", "rounding_method": "down"}

        assert calculator.compute(settings, self.fire(int_attr=4)) == 2

    def test_calculate_multiply_by_exact_decimal(self, calculator):
        """Test that products are computed without float error."""
        settings = {"arg": INT_ARG, "multiply_by": 0.1, "rounding_method": "up"}

        assert calculator.compute(settings, self.fire(int_attr=30)) == 3

    def test_calculate_rounds_before_multiplying(self, calculator):
        """Test that the value is rounded first, then multiplied."""
        settings = {"arg": DECIMAL_ARG, "rounding_method": "down", "multiply_by": 10}

        assert calculator.compute(settings, self.fire(decimal_number_attr=2.9)) == 20

    def test_calculate_fractional_product_without_rounding_method(self, calculator):
        """Test that a non-integer product with no rounding method yields 0."""
        settings = {"arg": INT_ARG, "multiply_by": 0.5}

        assert calculator.compute(settings, self.fire(int_attr=3)) == 0

    def test_calculate_decimal_without_rounding_method(self, calculator):
        """Test that a non-integer value with no rounding method yields 0."""
        assert calculator.compute({"arg": DECIMAL_ARG}, self.fire(decimal_number_attr=2.5)) == 0

    def test_calculate_min(self, calculator):
        """Test that values below the minimum are raised to it."""
        settings = {"arg": INT_ARG, "min": 5}

        assert calculator.compute(settings, self.fire(int_attr=3)) == 5

    def test_calculate_max(self, calculator):
        """Test that values above the maximum are lowered to it."""
        settings = {"arg": INT_ARG, "max": 2}

        assert calculator.compute(settings, self.fire(int_attr=3)) == 2

    def test_calculate_within_range(self, calculator):
        """Test that values inside the range are unchanged."""
        settings = {"arg": INT_ARG, "min": 1, "max": 5}

        assert calculator.compute(settings, self.fire(int_attr=3)) == 3

    def test_calculate_clamps_after_multiplying(self, calculator):
        """Test that the range applies to the final value."""
        settings = {"arg": INT_ARG, "multiply_by": 10, "max": 25}

        assert calculator.compute(settings, self.fire(int_attr=3)) == 25

    @pytest.mark.parametrize("values", [
        {},
        {"test_entity": {}},
        {"test_entity": {"int_attr": None}},
        {"test_entity": {"int_attr": ""}},
        {"test_entity": {"int_attr": 0}},
    ])
    def test_calculate_empty_value(self, calculator, values):
        """Test that a missing or empty value yields 0."""
        fire = TestDataFactory.create_fire(values)

        assert calculator.compute({"arg": INT_ARG}, fire) == 0

    def test_calculate_zero_value_ignores_min(self, calculator):
        """Test that a zero value awards nothing even with a minimum."""
        settings = {"arg": INT_ARG, "min": 5}

        assert calculator.compute(settings, self.fire(int_attr=0)) == 0

    @pytest.mark.parametrize("value", ["invalid", [1, 2], {"nested": 1}, True])
    def test_calculate_non_numeric_value(self, calculator, value):
        """Test that non-numeric values yield 0."""
        assert calculator.compute({"arg": INT_ARG}, self.fire(int_attr=value)) == 0

    def test_calculate_non_numeric_value_with_rounding(self, calculator):
        """Test that non-numeric values are not handed to the rounding method."""
        settings = {"arg": DECIMAL_ARG, "rounding_method": "nearest"}

        assert calculator.compute(settings, self.fire(decimal_number_attr="invalid")) == 0

    def test_calculate_rounding_method_deregistered(self, calculator, rounding_methods):
        """Test that an unknown rounding method fails closed."""
        rounding_methods.deregister("nearest")
        settings = {"arg": DECIMAL_ARG, "rounding_method": "nearest"}

        assert calculator.compute(settings, self.fire(decimal_number_attr=4.5)) == 0

    def test_calculate_arg_not_found(self, calculator):
        """Test that an arg missing from the event yields 0."""
        settings = {"arg": ["nonexistent", "int_attr"]}

        assert calculator.compute(settings, self.fire(int_attr=3)) == 0

    def test_calculate_related_entity_attribute(self, calculator):
        """Test reading a value through a relationship."""
        fire = TestDataFactory.create_fire(
            {"post": {"author": {"user": {"karma": 12}}}},
            event_args=TestDataFactory.create_post_event_args()
        )

        assert calculator.compute({"arg": ["post", "author", "user", "karma"]}, fire) == 12

    def test_calculate_unexpected_error(self, calculator):
        """Test that unexpected errors are logged and yield 0."""
        calculator.resolver = MagicMock()
        calculator.resolver.resolve.side_effect = RuntimeError("boom")

        assert calculator.compute({"arg": INT_ARG}, self.fire(int_attr=3)) == 0

    def test_calculate_multiply_large_value(self, calculator):
        """Test that products are exact beyond the default decimal precision."""
        settings = {"arg": INT_ARG, "multiply_by": 2}
        fire = self.fire(int_attr=12345678901234567890123456789)

        assert calculator.compute(settings, fire) == 24691357802469135780246913578

    def test_calculate_multiply_large_value_with_rounding(self, calculator):
        """Test rounding a large fractional product."""
        settings = {"arg": INT_ARG, "multiply_by": "0.5", "rounding_method": "up"}
        fire = self.fire(int_attr=10 ** 30 + 1)

        assert calculator.compute(settings, fire) == 5 * 10 ** 29 + 1

    def test_calculate_large_decimal_value(self, calculator):
        """Test rounding a decimal value with more digits than the default precision."""
        settings = {"arg": DECIMAL_ARG, "rounding_method": "down"}
        fire = self.fire(decimal_number_attr="123456789012345678901234567890.75")

        assert calculator.compute(settings, fire) == 123456789012345678901234567890

    def test_calculate_settings_not_mapping(self, calculator):
        """Test that corrupt settings yield 0."""
        assert calculator.compute("corrupt", self.fire(int_attr=3)) == 0
