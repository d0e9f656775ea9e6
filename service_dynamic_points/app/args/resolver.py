"""Resolves arg hierarchies against an event's args."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from .models import ArgKind, EventArgs, ResolvedArg


class ArgResolver(ABC):
    """Interface for locating args from a hierarchy of slugs."""

    @abstractmethod
    def resolve(self, event_args: EventArgs, hierarchy: Sequence[str]) -> Optional[ResolvedArg]:
        """Return the arg at the end of the hierarchy, or None if it doesn't exist."""
        pass

    @abstractmethod
    def get_titles(self, event_args: EventArgs, hierarchy: Sequence[str]) -> Optional[List[str]]:
        """Return display titles along the hierarchy, or None if it doesn't exist."""
        pass


class ArgHierarchyResolver(ArgResolver):
    """Walks the in-memory arg tree of an EventArgs."""

    def resolve(self, event_args: EventArgs, hierarchy: Sequence[str]) -> Optional[ResolvedArg]:
        if not _is_hierarchy(hierarchy):
            return None

        node = event_args.get_entity(hierarchy[0])

        for slug in hierarchy[1:]:
            if node is None:
                return None
            node = node.get_child(slug)

        if node is None:
            return None

        return ResolvedArg(path=tuple(hierarchy), node=node)

    def get_titles(self, event_args: EventArgs, hierarchy: Sequence[str]) -> Optional[List[str]]:
        if not _is_hierarchy(hierarchy):
            return None

        titles: List[str] = []
        node = None

        for depth, slug in enumerate(hierarchy):
            if depth == 0:
                next_node = event_args.get_entity(slug)
            else:
                next_node = node.get_child(slug)

            if next_node is None:
                return None

            is_related_entity = node is not None and node.kind == ArgKind.RELATIONSHIP
            node = next_node

            # "Author", not "Author » User"
            if is_related_entity:
                continue

            titles.append(node.title)

        return titles


def _is_hierarchy(hierarchy: Any) -> bool:
    return (
        isinstance(hierarchy, (list, tuple))
        and len(hierarchy) > 0
        and all(isinstance(slug, str) for slug in hierarchy)
    )
