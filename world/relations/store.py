"""
Pairwise affinity store.

Holds how each character regards each other character. Values are
directed: (A, B) is how A feels about B and is independent of (B, A).

Every write clamps to [min_value, max_value], so the bounds hold at all
times. Self-pairs are never stored.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from world.relations.bias import BiasTable
from world.relations.config import RelationsConfig, get_config
from world.relations.core import CharacterIdentity

logger = logging.getLogger(__name__)

Pair = Tuple[CharacterIdentity, CharacterIdentity]

# Marks an initialize() call that did not pass a bias table
_KEEP_BIAS: Any = object()


class AffinityStore:
    """
    Mutable map of (from, to) -> affinity value.

    The owning game-state context holds one store and hands it to
    whatever needs relationship queries.
    """

    def __init__(
        self,
        bias: Optional[BiasTable] = None,
        config: Optional[RelationsConfig] = None,
    ):
        self._bias = bias
        self._config = config or get_config()
        self._relationships: Dict[Pair, int] = {}

    @property
    def bias(self) -> Optional[BiasTable]:
        """Bias table used for initialization and lazy backfill."""
        return self._bias

    @property
    def config(self) -> RelationsConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def initialize(
        self,
        roster: Optional[Iterable[Optional[CharacterIdentity]]],
        bias: Optional[BiasTable] = _KEEP_BIAS,
    ) -> None:
        """
        Reset and create relationships for every ordered pair in roster.

        None entries and duplicates are skipped. An empty roster leaves the
        store empty. Calling twice with the same arguments gives the same
        contents.

        Args:
            roster: Characters to track
            bias: Species bias table; None means no modifiers. Left out, the
                table already held by the store is kept.
        """
        if bias is not _KEEP_BIAS:
            self._bias = bias
        self._relationships.clear()

        characters = _unique_characters(roster)
        for from_character in characters:
            for to_character in characters:
                if from_character == to_character:
                    continue
                self._relationships[(from_character, to_character)] = (
                    self._starting_value(from_character, to_character)
                )

        logger.debug(
            "Initialized %d relationships for %d characters",
            len(self._relationships), len(characters)
        )

    def reinitialize(self, roster: Optional[Iterable[Optional[CharacterIdentity]]]) -> None:
        """Initialize again with a new roster and the current bias table."""
        self.initialize(roster, self._bias)

    # -------------------------------------------------------------------------
    # Query / mutate
    # -------------------------------------------------------------------------

    def get(
        self,
        from_character: Optional[CharacterIdentity],
        to_character: Optional[CharacterIdentity],
    ) -> int:
        """
        How from_character regards to_character.

        Returns the base value for pairs never created, self-pairs and
        missing characters.
        """
        if from_character is None or to_character is None or from_character == to_character:
            return self._config.base_value
        return self._relationships.get((from_character, to_character), self._config.base_value)

    def modify(
        self,
        from_character: Optional[CharacterIdentity],
        to_character: Optional[CharacterIdentity],
        delta: int,
    ) -> None:
        """
        Add delta to how from_character regards to_character.

        A pair that does not exist yet is first created with the same
        starting value initialize() would give it. The result is clamped,
        so repeated large deltas saturate at the bounds.

        No-op for self-pairs and missing characters.
        """
        if from_character is None or to_character is None or from_character == to_character:
            return

        key = (from_character, to_character)
        if key not in self._relationships:
            self._relationships[key] = self._starting_value(from_character, to_character)

        self._relationships[key] = self._clamp(self._relationships[key] + delta)

    # -------------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------------

    def relations_from(self, character: CharacterIdentity) -> Dict[CharacterIdentity, int]:
        """Stored values from character toward everyone else."""
        return {to: value for (frm, to), value in self._relationships.items() if frm == character}

    def relations_to(self, character: CharacterIdentity) -> Dict[CharacterIdentity, int]:
        """Stored values from everyone else toward character."""
        return {frm: value for (frm, to), value in self._relationships.items() if to == character}

    def characters(self) -> List[CharacterIdentity]:
        """Every character appearing in a stored pair, in first-seen order."""
        seen: Dict[CharacterIdentity, None] = {}
        for frm, to in self._relationships:
            seen.setdefault(frm)
            seen.setdefault(to)
        return list(seen)

    def snapshot(self) -> Dict[Pair, int]:
        """Copy of all stored values."""
        return dict(self._relationships)

    def items(self) -> Iterator[Tuple[Pair, int]]:
        return iter(list(self._relationships.items()))

    def __contains__(self, pair: Pair) -> bool:
        return pair in self._relationships

    def __len__(self) -> int:
        return len(self._relationships)

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _starting_value(self, from_character: CharacterIdentity, to_character: CharacterIdentity) -> int:
        value = self._config.base_value
        if self._bias is not None:
            value += self._bias.lookup(from_character.species, to_character.species)
        return self._clamp(value)

    def _clamp(self, value: int) -> int:
        return max(self._config.min_value, min(self._config.max_value, value))


def _unique_characters(
    roster: Optional[Iterable[Optional[CharacterIdentity]]]
) -> List[CharacterIdentity]:
    """Drop None entries and duplicates, keeping first occurrence order."""
    if not roster:
        return []
    unique: Dict[CharacterIdentity, None] = {}
    for character in roster:
        if character is not None:
            unique.setdefault(character)
    return list(unique)
