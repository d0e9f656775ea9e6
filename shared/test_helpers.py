"""
Test helper functions and factory methods for the Dynamic Points service.
"""

from typing import Dict, Any, Optional

from service_dynamic_points.app.args.models import ArgKind, ArgNode, EventArgs
from service_dynamic_points.app.rules.models import HookFire


class TestDataFactory:
    """Factory for creating test data."""

    @staticmethod
    def create_test_entity(slug: str = "test_entity") -> ArgNode:
        """Create an entity with one attribute of each interesting data type."""
        entity = ArgNode(slug=slug, title="Test Entity", kind=ArgKind.ENTITY)
        entity.add_child(ArgNode(
            slug="int_attr", title="Integer Attr", kind=ArgKind.ATTR, data_type="integer"
        ))
        entity.add_child(ArgNode(
            slug="decimal_number_attr",
            title="Decimal Attr",
            kind=ArgKind.ATTR,
            data_type="decimal_number"
        ))
        entity.add_child(ArgNode(
            slug="text_attr", title="Text Attr", kind=ArgKind.ATTR, data_type="text"
        ))
        return entity

    @staticmethod
    def create_post_event_args() -> EventArgs:
        """Create args for a post event with an author relationship."""
        return EventArgs.from_dict(TestDataFactory.create_post_event_schema())

    @staticmethod
    def create_post_event_schema() -> Dict[str, Any]:
        """Create the plain-dict schema of a post event."""
        return {
            "entities": [
                {
                    "slug": "post",
                    "title": "Post",
                    "children": [
                        {"slug": "comment_count", "title": "Comment Count", "data_type": "integer"},
                        {"slug": "rating", "title": "Rating", "data_type": "decimal_number"},
                        {"slug": "title", "title": "Title", "data_type": "text"},
                        {
                            "slug": "author",
                            "title": "Author",
                            "kind": "relationship",
                            "children": [
                                {
                                    "slug": "user",
                                    "title": "User",
                                    "children": [
                                        {"slug": "karma", "title": "Karma", "data_type": "integer"}
                                    ]
                                }
                            ]
                        }
                    ]
                }
            ]
        }

    @staticmethod
    def create_test_event_args() -> EventArgs:
        """Create event args holding the test entity."""
        return EventArgs([TestDataFactory.create_test_entity()])

    @staticmethod
    def create_fire(
        values: Optional[Dict[str, Any]] = None,
        event_args: Optional[EventArgs] = None,
        reaction_id: str = "reaction-1"
    ) -> HookFire:
        """Create a fire for the test entity."""
        return HookFire(
            event_args=event_args or TestDataFactory.create_test_event_args(),
            reaction_id=reaction_id,
            values=values or {}
        )

    @staticmethod
    def create_test_entity_values(**attrs: Any) -> Dict[str, Any]:
        """Create fire values for the test entity."""
        return {"test_entity": dict(attrs)}
