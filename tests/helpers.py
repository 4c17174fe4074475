"""
Test helpers for building rosters and tier configs.
"""

from typing import List

from world.relations.core import CharacterIdentity, Species, TierRange
from world.relations.tiers import TierClassifier


def make_character(character_id: str, species: Species, display_name: str = "") -> CharacterIdentity:
    """Create a character reference."""
    return CharacterIdentity(character_id=character_id, species=species, display_name=display_name)


def make_roster(*species: Species) -> List[CharacterIdentity]:
    """
    Create one character per species given.

    Ids are "<species>_<n>" so the same species can appear twice.
    """
    return [
        make_character(f"{s.value}_{i}", s, display_name=f"{s.value.title()} {i}")
        for i, s in enumerate(species)
    ]


def example_tiers() -> TierClassifier:
    """Three-tier config: Hostile from 0, Neutral from 40, Friendly from 70."""
    return TierClassifier([
        TierRange(0, "Hostile"),
        TierRange(40, "Neutral"),
        TierRange(70, "Friendly"),
    ])
