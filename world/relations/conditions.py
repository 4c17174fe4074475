"""
Relationship conditions and consequences for game events.

A condition checks a relationship tier before an event fires; a
consequence shifts a relationship after it completes. Both take the
RelationshipSystem explicitly and never raise on bad authoring data:
they log a warning and fail closed.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from world.relations.core import CharacterIdentity
from world.relations.system import RelationshipSystem

logger = logging.getLogger(__name__)


def _name(character: Optional[CharacterIdentity]) -> str:
    return character.label if character is not None else "?"


@dataclass
class RelationshipTierCondition:
    """
    Passes when from -> to has reached at least required_tier.

    Tiers are compared by their ordinal in the tier config, so "Friendly"
    is satisfied by "Friendly" or anything stronger.
    """
    from_character: Optional[CharacterIdentity]
    to_character: Optional[CharacterIdentity]
    required_tier: str

    def evaluate(self, system: RelationshipSystem) -> bool:
        if self.from_character is None or self.to_character is None:
            logger.warning("Tier condition has no from or to character; failing.")
            return False

        if not self.required_tier:
            logger.warning("Tier condition has no required tier; failing.")
            return False

        current_tier = system.get_relationship_tier(self.from_character, self.to_character)
        current_index = system.get_tier_index(current_tier)
        required_index = system.get_tier_index(self.required_tier)

        if current_index < 0:
            logger.warning("Current tier '%s' not found in tier config.", current_tier)
            return False

        if required_index < 0:
            logger.warning("Required tier '%s' not found in tier config.", self.required_tier)
            return False

        return current_index >= required_index

    def describe(self) -> str:
        return (
            f"Relationship {_name(self.from_character)} -> {_name(self.to_character)} "
            f">= tier '{self.required_tier}'"
        )


@dataclass
class RelationshipConsequence:
    """Shifts from -> to by delta, and to -> from as well when mutual."""
    from_character: Optional[CharacterIdentity]
    to_character: Optional[CharacterIdentity]
    delta: int
    mutual: bool = False

    def execute(self, system: RelationshipSystem) -> None:
        if self.from_character is None or self.to_character is None:
            logger.warning("Relationship consequence has no from or to character; skipping.")
            return

        system.modify_relationship(self.from_character, self.to_character, self.delta)
        if self.mutual:
            system.modify_relationship(self.to_character, self.from_character, self.delta)

    def describe(self) -> str:
        delta = f"{self.delta:+d}" if self.delta else "0"
        mutual = " (Mutual)" if self.mutual else ""
        return (
            f"Relationship {_name(self.from_character)} -> {_name(self.to_character)} "
            f"{delta}{mutual}"
        )
