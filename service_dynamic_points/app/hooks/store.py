"""
In-memory reaction storage.
"""

from typing import Any, Dict, List, Optional

from shared.logging import get_logger
from ..rules.models import Reaction


class ReactionStore:
    """Holds reactions and their metadata for the lifetime of the process."""

    def __init__(self):
        self.logger = get_logger("dynamic_points.reaction_store")
        self.reactions: Dict[str, Reaction] = {}

    def add_reaction(self, reaction: Reaction) -> Reaction:
        """Add or replace a reaction."""
        self.reactions[reaction.reaction_id] = reaction
        self.logger.info(
            "Reaction saved",
            reaction_id=reaction.reaction_id,
            event_slug=reaction.event_slug
        )
        return reaction

    def get_reaction(self, reaction_id: str) -> Optional[Reaction]:
        return self.reactions.get(reaction_id)

    def remove_reaction(self, reaction_id: str) -> bool:
        if reaction_id not in self.reactions:
            return False

        del self.reactions[reaction_id]
        self.logger.info("Reaction removed", reaction_id=reaction_id)
        return True

    def get_meta(self, reaction_id: str, key: str) -> Any:
        """Get a piece of reaction metadata, or None."""
        reaction = self.reactions.get(reaction_id)

        if reaction is None:
            return None

        return reaction.meta.get(key)

    def update_meta(self, reaction_id: str, key: str, value: Any) -> bool:
        reaction = self.reactions.get(reaction_id)

        if reaction is None:
            return False

        reaction.meta[key] = value
        return True

    def delete_meta(self, reaction_id: str, key: str) -> bool:
        reaction = self.reactions.get(reaction_id)

        if reaction is None or key not in reaction.meta:
            return False

        del reaction.meta[key]
        return True

    def get_reactions_by_event(self, event_slug: str) -> List[Reaction]:
        return [
            reaction for reaction in self.reactions.values()
            if reaction.event_slug == event_slug
        ]
