"""Registry for managing rounding methods."""

from typing import Dict, Optional

from shared.errors import DuplicateRegistrationError
from shared.logging import get_logger
from .methods import (
    RoundingMethod,
    NearestRoundingMethod,
    UpRoundingMethod,
    DownRoundingMethod
)

logger = get_logger("dynamic_points.rounding_methods")


class RoundingMethodRegistry:
    """Registry mapping rounding method keys to rounding methods.

    Registration happens while the service is set up; after that the registry
    is only read. Registering a key twice is rejected so that a stored
    ``rounding_method`` can never silently change meaning.
    """

    def __init__(self):
        self._methods: Dict[str, RoundingMethod] = {}

    def register(self, key: str, method: RoundingMethod):
        """Register a rounding method under a key."""
        if not isinstance(method, RoundingMethod):
            raise ValueError(
                f"Rounding method must implement RoundingMethod, got {type(method)}"
            )

        if method.key != key:
            raise ValueError(
                f"Rounding method key {method.key!r} does not match registration key {key!r}"
            )

        if key in self._methods:
            raise DuplicateRegistrationError(key)

        self._methods[key] = method

        logger.info("Registered rounding method", key=key, method=type(method).__name__)

    def deregister(self, key: str) -> bool:
        """Remove a rounding method. Returns False if it was not registered."""
        if key not in self._methods:
            return False

        del self._methods[key]
        logger.info("Deregistered rounding method", key=key)
        return True

    def is_registered(self, key: str) -> bool:
        """Check whether a rounding method is registered under a key."""
        return key in self._methods

    def get(self, key: str) -> Optional[RoundingMethod]:
        """Get a rounding method by key."""
        return self._methods.get(key)

    def get_all(self) -> Dict[str, RoundingMethod]:
        """Get all registered rounding methods, in registration order."""
        return dict(self._methods)

    def __contains__(self, key: object) -> bool:
        return key in self._methods

    def __len__(self) -> int:
        """Number of registered rounding methods."""
        return len(self._methods)

    def __repr__(self) -> str:
        """String representation for debugging."""
        keys = ", ".join(self._methods.keys())
        return f"RoundingMethodRegistry({keys})"


def create_default_registry() -> RoundingMethodRegistry:
    """Create a registry holding the built-in rounding methods."""
    registry = RoundingMethodRegistry()
    registry.register("nearest", NearestRoundingMethod("nearest"))
    registry.register("up", UpRoundingMethod("up"))
    registry.register("down", DownRoundingMethod("down"))
    return registry
