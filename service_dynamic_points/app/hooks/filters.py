"""
The points-to-award filter chain.

When a points reaction fires, the number of points it awards is passed
through each registered filter in priority order (lower runs first). Each
filter receives the current value and the fire, and returns the new value.
"""

from typing import Callable, List, Tuple

from shared.logging import get_logger
from ..rules.models import HookFire

PointsFilter = Callable[[int, HookFire], int]


class PointsToAwardFilters:
    """Priority-ordered chain of points-to-award filters."""

    def __init__(self):
        self.logger = get_logger("dynamic_points.filters")
        self._filters: List[Tuple[int, int, PointsFilter]] = []
        self._sequence = 0

    def add_filter(self, callback: PointsFilter, priority: int = 10):
        """Add a filter. Filters with equal priority run in the order added."""
        self._filters.append((priority, self._sequence, callback))
        self._sequence += 1
        self._filters.sort(key=lambda f: (f[0], f[1]))

        self.logger.info(
            "Points filter added",
            callback=getattr(callback, "__qualname__", repr(callback)),
            priority=priority
        )

    def remove_filter(self, callback: PointsFilter) -> bool:
        """Remove a filter. Returns False if it was not added."""
        remaining = [f for f in self._filters if f[2] != callback]
        removed = len(remaining) != len(self._filters)
        self._filters = remaining
        return removed

    def has_filter(self, callback: PointsFilter) -> bool:
        return any(f[2] == callback for f in self._filters)

    def apply(self, points: int, fire: HookFire) -> int:
        """Run the points through every filter."""
        for _, _, callback in self._filters:
            points = callback(points, fire)

        return points

    def __len__(self) -> int:
        return len(self._filters)
