"""
Rounding methods package.

A rounding method reduces a number to an integer under a specific policy.
Methods are registered by key in a RoundingMethodRegistry, which is passed
explicitly to the settings validator, the points calculator and the
extension.

Modules of interest:
- methods: RoundingMethod base class and the nearest/up/down built-ins.
- registry: RoundingMethodRegistry and the default registry factory.
"""

from .methods import (
    RoundingMethod,
    NearestRoundingMethod,
    UpRoundingMethod,
    DownRoundingMethod
)
from .registry import RoundingMethodRegistry, create_default_registry

__all__ = [
    "RoundingMethod",
    "NearestRoundingMethod",
    "UpRoundingMethod",
    "DownRoundingMethod",
    "RoundingMethodRegistry",
    "create_default_registry",
]
