"""
Event args package.

Models the entities, relationships and attributes an event exposes, and
resolves arg hierarchies (paths of slugs) against them.
"""

from .models import ArgKind, AttrDataType, ArgNode, EventArgs, ResolvedArg
from .resolver import ArgResolver, ArgHierarchyResolver

__all__ = [
    "ArgKind",
    "AttrDataType",
    "ArgNode",
    "EventArgs",
    "ResolvedArg",
    "ArgResolver",
    "ArgHierarchyResolver",
]
