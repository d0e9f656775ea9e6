"""
Shared metrics configuration for the Dynamic Points service.
"""

from prometheus_client import Counter, Histogram, Info, CollectorRegistry
from typing import Dict, Any, Optional
import time
from contextlib import contextmanager


class MetricsCollector:
    """Centralized metrics collector for services."""

    def __init__(self, service_name: str, registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up common metrics for the service."""

        # Service info
        self._metrics["service_info"] = Info(
            "service_info",
            "Service information",
            registry=self.registry
        )
        self._metrics["service_info"].info({
            "service": self.service_name,
            "version": "1.0.0"
        })

        # HTTP metrics
        self._metrics["http_requests_total"] = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=self.registry
        )

        self._metrics["http_request_duration_seconds"] = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=self.registry
        )

        # Health check metrics
        self._metrics["health_check_total"] = Counter(
            "health_check_total",
            "Total health check requests",
            ["status"],
            registry=self.registry
        )

        # Error metrics
        self._metrics["errors_total"] = Counter(
            "errors_total",
            "Total errors",
            ["error_type", "service"],
            registry=self.registry
        )

        self._setup_dynamic_points_metrics()

    def _setup_dynamic_points_metrics(self):
        """Set up dynamic points metrics."""
        self._metrics["settings_validations_total"] = Counter(
            "settings_validations_total",
            "Total dynamic points settings validations",
            ["outcome"],
            registry=self.registry
        )

        self._metrics["awards_computed_total"] = Counter(
            "awards_computed_total",
            "Total award computations through the points filter",
            ["outcome"],
            registry=self.registry
        )

        self._metrics["award_computation_duration_seconds"] = Histogram(
            "award_computation_duration_seconds",
            "Award computation duration in seconds",
            registry=self.registry
        )

    def record_http_request(self, method: str, endpoint: str, status_code: int, duration: float):
        """Record HTTP request metrics."""
        self._metrics["http_requests_total"].labels(
            method=method,
            endpoint=endpoint,
            status_code=str(status_code)
        ).inc()

        self._metrics["http_request_duration_seconds"].labels(
            method=method,
            endpoint=endpoint
        ).observe(duration)

    def record_health_check(self, status: str):
        """Record health check metrics."""
        self._metrics["health_check_total"].labels(status=status).inc()

    def record_error(self, error_type: str, service: Optional[str] = None):
        """Record error metrics."""
        service_name = service or self.service_name
        self._metrics["errors_total"].labels(error_type=error_type, service=service_name).inc()

    def record_validation(self, valid: bool):
        """Record the outcome of a settings validation."""
        outcome = "valid" if valid else "invalid"
        self._metrics["settings_validations_total"].labels(outcome=outcome).inc()

    def record_award(self, outcome: str):
        """Record the outcome of an award computation."""
        self._metrics["awards_computed_total"].labels(outcome=outcome).inc()

    @contextmanager
    def time_award_computation(self):
        """Context manager to time an award computation."""
        start_time = time.time()
        try:
            yield
        finally:
            self._metrics["award_computation_duration_seconds"].observe(time.time() - start_time)


def get_metrics_collector(service_name: str, registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector for a service."""
    return MetricsCollector(service_name, registry)
