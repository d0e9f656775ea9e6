"""
Shared utilities for the Dynamic Points service.

This package aggregates common building blocks consumed by the service:

- config: Service configuration via pydantic-settings
- logging: Structured logging with correlation context
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses
- base_service: FastAPI service shell with health and metrics routes
- test_helpers: Factories for event args and fires used by the tests

Apart from test_helpers, do not import from service_* packages into shared/.
"""
