"""
Arg hierarchy data models.

An event exposes a tree of args: entities at the root, their attributes and
relationships below, and the related entity below each relationship. A path
through that tree, e.g. ``["post", "author", "user", "karma"]``, identifies
the attribute a dynamic points value is read from.
"""

from typing import Dict, Any, Optional, List, Mapping, Tuple
from dataclasses import dataclass, field
from enum import Enum


class ArgKind(str, Enum):
    """Arg node kinds."""
    ENTITY = "entity"
    RELATIONSHIP = "relationship"
    ATTR = "attr"


class AttrDataType(str, Enum):
    """Attribute data types with special meaning for dynamic points."""
    INTEGER = "integer"
    DECIMAL_NUMBER = "decimal_number"


@dataclass
class ArgNode:
    """A node in an event's arg hierarchy."""
    slug: str
    title: str
    kind: ArgKind = ArgKind.ENTITY
    data_type: Optional[str] = None
    children: Dict[str, "ArgNode"] = field(default_factory=dict)

    def add_child(self, child: "ArgNode") -> "ArgNode":
        self.children[child.slug] = child
        return child

    def get_child(self, slug: str) -> Optional["ArgNode"]:
        return self.children.get(slug)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ArgNode":
        """Build a node (and its subtree) from a plain mapping."""
        data_type = data.get("data_type")
        kind = data.get("kind") or (ArgKind.ATTR if data_type else ArgKind.ENTITY)

        node = cls(
            slug=data["slug"],
            title=data.get("title", data["slug"]),
            kind=ArgKind(kind),
            data_type=data_type
        )

        for child in data.get("children", []):
            node.add_child(cls.from_dict(child))

        return node

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "slug": self.slug,
            "title": self.title,
            "kind": self.kind.value,
        }
        if self.data_type is not None:
            data["data_type"] = self.data_type
        if self.children:
            data["children"] = [child.to_dict() for child in self.children.values()]
        return data


class EventArgs:
    """The root entities available to reactions for one event."""

    def __init__(self, entities: Optional[List[ArgNode]] = None):
        self.entities: Dict[str, ArgNode] = {}
        for entity in entities or []:
            self.add_entity(entity)

    def add_entity(self, entity: ArgNode):
        """Add a root entity."""
        self.entities[entity.slug] = entity

    def get_entity(self, slug: str) -> Optional[ArgNode]:
        """Get a root entity by slug."""
        return self.entities.get(slug)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EventArgs":
        """Build event args from ``{"entities": [...]}``."""
        return cls([ArgNode.from_dict(entity) for entity in data.get("entities", [])])

    def to_dict(self) -> Dict[str, Any]:
        return {"entities": [entity.to_dict() for entity in self.entities.values()]}


@dataclass
class ResolvedArg:
    """An arg node located by its full path."""
    path: Tuple[str, ...]
    node: ArgNode

    @property
    def is_attribute(self) -> bool:
        return self.node.kind == ArgKind.ATTR

    @property
    def data_type(self) -> Optional[str]:
        return self.node.data_type

    @property
    def title(self) -> str:
        return self.node.title

    def get_value(self, values: Mapping[str, Any]) -> Any:
        """Read this arg's value for one fire.

        ``values`` mirrors the hierarchy as nested mappings. Returns None when
        any step along the path is missing.
        """
        value: Any = values
        for part in self.path:
            if isinstance(value, Mapping) and part in value:
                value = value[part]
            else:
                return None

        return value
