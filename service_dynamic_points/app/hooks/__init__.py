"""
Hooks package.

Connects dynamic points to the host's reaction machinery:

- extension: DynamicPointsExtension, the validate/describe/award surface.
- filters: PointsToAwardFilters, the priority-ordered award filter chain.
- store: ReactionStore, in-memory reactions and their metadata.
"""

from .extension import DynamicPointsExtension
from .filters import PointsToAwardFilters
from .store import ReactionStore

__all__ = [
    "DynamicPointsExtension",
    "PointsToAwardFilters",
    "ReactionStore",
]
