"""
Core data structures for the relations system.

Characters hold directed affinity toward each other. A character's species
feeds the starting value through the bias table; everything else about the
character is opaque here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


BASE_VALUE = 50
MIN_VALUE = 1
MAX_VALUE = 100
SAME_SPECIES_BONUS = 15
UNKNOWN_TIER = "Unknown"


class Species(str, Enum):
    """
    Closed set of character species.

    Values double as the keys used in YAML data files.
    """
    HUMAN = "human"
    ELF = "elf"
    DARK_ELF = "dark_elf"
    DWARF = "dwarf"
    MERMAID = "mermaid"
    GHOUL = "ghoul"
    ONI = "oni"
    DEMON = "demon"
    FERAL = "feral"
    DRACONITE = "draconite"
    TIEFLING = "tiefling"


@dataclass(frozen=True)
class BiasEntry:
    """
    Directed species modifier.

    (A, B) and (B, A) are independent entries and need not match.
    """
    from_species: Species
    to_species: Species
    modifier: int

    @property
    def pair(self) -> Tuple[Species, Species]:
        return (self.from_species, self.to_species)


@dataclass(frozen=True)
class CharacterIdentity:
    """
    Reference to a character.

    Identity is the character_id alone: two references are the same
    character only if their ids match.
    """
    character_id: str
    species: Species = field(compare=False)
    display_name: str = field(default="", compare=False)

    @property
    def label(self) -> str:
        """Name to show in debug output."""
        return self.display_name or self.character_id


@dataclass(frozen=True)
class TierRange:
    """A tier starts at lower_bound and runs up to the next tier's bound."""
    lower_bound: int
    label: str


@dataclass(frozen=True)
class RelationshipChange:
    """A single authored adjustment, e.g. from a dialogue choice."""
    from_character: CharacterIdentity
    to_character: CharacterIdentity
    delta: int
