"""
Species bias table.

Directed modifiers between species, applied on top of the base affinity
when relationships are first created. Lookups are exact on the ordered
pair and fall back to 0.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from world.relations.core import BiasEntry, Species
from world.relations.validation import parse_species, validate_bias_entries

logger = logging.getLogger(__name__)

S = Species

# =============================================================================
# POLITICAL MODIFIERS
# =============================================================================
# Hand-authored cross-species stances. Unilateral: read as "row feels about
# column". Pairs not listed resolve to 0.

POLITICAL_MODIFIERS: Dict[Species, Dict[Species, int]] = {
    S.HUMAN: {
        S.ELF: 5, S.DARK_ELF: -5, S.DWARF: -10, S.MERMAID: 5, S.GHOUL: -20,
        S.ONI: -10, S.DEMON: -25, S.FERAL: -15, S.DRACONITE: -5, S.TIEFLING: -10,
    },
    S.ELF: {
        S.HUMAN: 5, S.DARK_ELF: -25, S.DWARF: -5, S.MERMAID: 10, S.GHOUL: -30,
        S.DEMON: -35, S.FERAL: -15, S.DRACONITE: 0, S.TIEFLING: -20,
    },
    S.DARK_ELF: {
        S.HUMAN: -5, S.ELF: -20, S.DWARF: -10, S.MERMAID: 0, S.GHOUL: -10,
        S.DEMON: 5, S.FERAL: 0, S.DRACONITE: 5, S.TIEFLING: 10,
    },
    S.DWARF: {
        S.HUMAN: 10, S.ELF: -5, S.DARK_ELF: -10, S.MERMAID: 0, S.GHOUL: -25,
        S.DEMON: -30, S.FERAL: -15, S.DRACONITE: 5, S.TIEFLING: -10,
    },
    S.MERMAID: {
        S.HUMAN: 5, S.ELF: 10, S.DARK_ELF: 0, S.DWARF: 0, S.GHOUL: -15,
        S.DEMON: -20, S.FERAL: -10, S.DRACONITE: 5, S.TIEFLING: -5,
    },
    S.GHOUL: {
        S.HUMAN: -20, S.ELF: -30, S.DARK_ELF: -10, S.DWARF: -25, S.MERMAID: -15,
        S.DEMON: 10, S.ONI: 5, S.DRACONITE: 0, S.TIEFLING: 5,
    },
    S.ONI: {
        S.HUMAN: -10, S.ELF: -15, S.DARK_ELF: 0, S.DWARF: 5, S.MERMAID: -5,
        S.GHOUL: 5, S.DEMON: 10, S.FERAL: 10, S.DRACONITE: 5, S.TIEFLING: 5,
    },
    S.DEMON: {
        S.HUMAN: -25, S.ELF: -35, S.DARK_ELF: 5, S.DWARF: -30, S.MERMAID: -20,
        S.GHOUL: 10, S.ONI: 10, S.FERAL: 5, S.DRACONITE: 0, S.TIEFLING: 20,
    },
    S.FERAL: {
        S.HUMAN: -15, S.ELF: -15, S.DARK_ELF: 0, S.DWARF: -15, S.MERMAID: -10,
        S.GHOUL: 5, S.ONI: 10, S.DEMON: 5, S.DRACONITE: 5, S.TIEFLING: 0,
    },
    S.DRACONITE: {
        S.HUMAN: -5, S.ELF: 0, S.DARK_ELF: 5, S.DWARF: 5, S.MERMAID: 5,
        S.GHOUL: 0, S.ONI: 5, S.DEMON: 0, S.FERAL: 5, S.TIEFLING: 0,
    },
    S.TIEFLING: {
        S.HUMAN: -10, S.ELF: -20, S.DARK_ELF: 10, S.DWARF: -10, S.MERMAID: -5,
        S.GHOUL: 5, S.ONI: 5, S.DEMON: 20, S.FERAL: 0, S.DRACONITE: 0,
    },
}


# =============================================================================
# BIAS TABLE
# =============================================================================

class BiasTable:
    """
    Immutable lookup of directed species modifiers.

    At most one entry per ordered pair; duplicates are rejected when the
    table is built, so lookup itself can never fail.
    """

    def __init__(self, entries: Iterable[BiasEntry] = ()):
        self._modifiers: Dict[Tuple[Species, Species], int] = validate_bias_entries(entries)

    @classmethod
    def from_mapping(
        cls,
        nested: Mapping[Union[str, Species], Mapping[Union[str, Species], int]]
    ) -> "BiasTable":
        """
        Build a table from {from_species: {to_species: modifier}}.

        Species may be given as enum members or their string values.

        Raises:
            UnknownSpeciesError: If a species name is not recognised
            BiasTableValidationError: If a modifier is not an integer
        """
        entries = []
        for from_name, row in nested.items():
            from_species = parse_species(from_name)
            for to_name, modifier in (row or {}).items():
                entries.append(BiasEntry(from_species, parse_species(to_name), modifier))
        return cls(entries)

    def lookup(self, from_species: Species, to_species: Species) -> int:
        """
        Modifier for (from_species -> to_species).

        Returns 0 when no entry matches exactly. Same-species pairs have no
        implicit bonus here; they resolve to 0 unless explicitly listed.
        """
        return self._modifiers.get((from_species, to_species), 0)

    def entries(self) -> List[BiasEntry]:
        """All entries as BiasEntry records."""
        return [BiasEntry(f, t, m) for (f, t), m in self._modifiers.items()]

    def __contains__(self, pair: Tuple[Species, Species]) -> bool:
        return pair in self._modifiers

    def __len__(self) -> int:
        return len(self._modifiers)

    def __iter__(self) -> Iterator[BiasEntry]:
        return iter(self.entries())

    def __repr__(self) -> str:
        return f"BiasTable({len(self)} entries)"


# =============================================================================
# AUTHORING
# =============================================================================

def generate_bias_entries(
    species: Iterable[Species] = Species,
    modifiers: Optional[Mapping[Species, Mapping[Species, int]]] = None,
    same_species_bonus: Optional[int] = None,
) -> List[BiasEntry]:
    """
    Generate a full matrix of bias entries.

    One entry per ordered pair, self-pairs included. Self-pairs get
    same_species_bonus; cross pairs come from modifiers, defaulting to 0.

    This is an authoring aid for producing data files. The runtime table
    does not depend on it.

    Args:
        species: Species to cover (default: all)
        modifiers: Hand-authored cross-species values (default: POLITICAL_MODIFIERS)
        same_species_bonus: Modifier for (X, X) pairs (default: active config)

    Returns:
        List of BiasEntry, len(species) ** 2 long
    """
    if same_species_bonus is None:
        from world.relations.config import get_config
        same_species_bonus = get_config().same_species_bonus
    if modifiers is None:
        modifiers = POLITICAL_MODIFIERS

    all_species = list(species)
    entries = []
    for from_species in all_species:
        row = modifiers.get(from_species, {})
        for to_species in all_species:
            if from_species == to_species:
                modifier = same_species_bonus
            else:
                modifier = row.get(to_species, 0)
            entries.append(BiasEntry(from_species, to_species, modifier))

    logger.debug("Generated %d bias entries for %d species", len(entries), len(all_species))
    return entries


def default_bias_table() -> BiasTable:
    """Bias table built from the hand-authored political modifiers."""
    return BiasTable.from_mapping(POLITICAL_MODIFIERS)
