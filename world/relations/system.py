"""
Relationship service.

The game-state context owns one RelationshipSystem and passes it to
dialogue, events and admin code. It bundles the store with the bias table,
the tier config and the roster, and reports configuration problems through
logging rather than raising.
"""

import logging
from typing import Iterable, List, Optional

from world.relations.bias import BiasTable
from world.relations.config import get_config
from world.relations.core import CharacterIdentity, RelationshipChange
from world.relations.store import AffinityStore
from world.relations.tiers import TierClassifier

logger = logging.getLogger(__name__)


class RelationshipSystem:
    """Query and adjust character relationships."""

    def __init__(
        self,
        roster: Optional[Iterable[Optional[CharacterIdentity]]] = None,
        bias: Optional[BiasTable] = None,
        tiers: Optional[TierClassifier] = None,
        store: Optional[AffinityStore] = None,
    ):
        self.roster: List[Optional[CharacterIdentity]] = list(roster or [])
        self.bias = bias
        self.tiers = tiers
        self.store = store if store is not None else AffinityStore(bias)

        self.validate_configuration()
        self.store.initialize(self.roster, self.bias)
        if self.roster:
            logger.info("Relationships initialized with %d characters", len(self.roster))

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate_configuration(self) -> List[str]:
        """
        Check for missing configuration.

        Each issue is logged as a warning and returned. Nothing here is
        fatal: the system still works with defaults.
        """
        issues = []

        if self.bias is None:
            issues.append("No bias table configured. Species modifiers will not be applied.")

        if self.tiers is None or not self.tiers.configured:
            issues.append("No tier config configured. Tier queries will return 'Unknown'.")

        if not self.roster:
            issues.append("Roster is empty. No relationships will be initialized.")
        else:
            missing = sum(1 for character in self.roster if character is None)
            if missing:
                issues.append(f"Roster contains {missing} empty entries. These will be skipped.")

        for issue in issues:
            logger.warning(issue)
        if not issues:
            logger.info("Relations configuration validated successfully.")

        return issues

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def get_relationship(
        self,
        from_character: Optional[CharacterIdentity],
        to_character: Optional[CharacterIdentity],
    ) -> int:
        return self.store.get(from_character, to_character)

    def modify_relationship(
        self,
        from_character: Optional[CharacterIdentity],
        to_character: Optional[CharacterIdentity],
        delta: int,
    ) -> None:
        """Adjust from -> to by delta. The result is clamped by the store."""
        self.store.modify(from_character, to_character, delta)

    def get_relationship_tier(
        self,
        from_character: Optional[CharacterIdentity],
        to_character: Optional[CharacterIdentity],
    ) -> str:
        """Tier label for from -> to, or 'Unknown' without a tier config."""
        if self.tiers is None:
            logger.warning("No tier config configured; returning 'Unknown'.")
            return get_config().unknown_tier
        return self.tiers.classify(self.get_relationship(from_character, to_character))

    def get_tier_index(self, label: str) -> int:
        """Ordinal of a tier label, -1 if unknown or unconfigured."""
        if self.tiers is None:
            return -1
        return self.tiers.tier_index(label)

    def reinitialize(self, roster: Optional[Iterable[Optional[CharacterIdentity]]]) -> None:
        """
        Rebuild relationships for a new roster with the configured bias table.

        Useful on scene transitions or when characters are loaded late.
        """
        self.roster = list(roster or [])
        if not self.roster:
            logger.warning("Reinitialize called with an empty roster.")
        self.store.initialize(self.roster, self.bias)
        if self.roster:
            logger.info("Relationships reinitialized with %d characters", len(self.roster))

    def apply_changes(self, changes: Iterable[RelationshipChange], mutual: bool = False) -> None:
        """
        Apply authored relationship changes.

        Args:
            changes: Changes to apply in order
            mutual: Also apply each delta in the to -> from direction
        """
        for change in changes:
            self.modify_relationship(change.from_character, change.to_character, change.delta)
            if mutual:
                self.modify_relationship(change.to_character, change.from_character, change.delta)
