"""
Validation for relations configuration data.

Runtime lookups never raise. Everything that can go wrong is caught here,
when bias tables and tier configs are authored or loaded.
"""

from typing import Dict, Iterable, List, Tuple, Union

from world.relations.core import BiasEntry, Species, TierRange


# =============================================================================
# VALIDATION ERRORS
# =============================================================================

class RelationsConfigError(ValueError):
    """Raised when relations configuration is invalid."""
    pass


class UnknownSpeciesError(RelationsConfigError):
    """Raised when a species name is not in the Species enum."""
    pass


class BiasTableValidationError(RelationsConfigError):
    """Raised when bias entries are malformed or duplicated."""
    pass


class TierConfigValidationError(RelationsConfigError):
    """Raised when tier ranges are malformed or duplicated."""
    pass


# =============================================================================
# VALIDATION FUNCTIONS
# =============================================================================

def parse_species(value: Union[str, Species]) -> Species:
    """
    Resolve a species from its enum member or string value.

    Args:
        value: Species member or its YAML key (e.g. "dark_elf")

    Returns:
        The matching Species

    Raises:
        UnknownSpeciesError: If the name is not a known species
    """
    if isinstance(value, Species):
        return value

    try:
        return Species(str(value).strip().lower())
    except ValueError:
        known = ", ".join(s.value for s in Species)
        raise UnknownSpeciesError(
            f"Unknown species '{value}'. Known species: {known}"
        ) from None


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid modifier or bound
    return isinstance(value, int) and not isinstance(value, bool)


def validate_bias_entries(entries: Iterable[BiasEntry]) -> Dict[Tuple[Species, Species], int]:
    """
    Validate bias entries and index them by ordered species pair.

    Args:
        entries: Bias entries to check

    Returns:
        Dict mapping (from_species, to_species) -> modifier

    Raises:
        BiasTableValidationError: On duplicate pairs or non-integer modifiers
    """
    index: Dict[Tuple[Species, Species], int] = {}
    errors: List[str] = []

    for entry in entries:
        if not _is_int(entry.modifier):
            errors.append(
                f"{entry.from_species.value} -> {entry.to_species.value}: "
                f"modifier must be an integer, got {entry.modifier!r}"
            )
            continue
        if entry.pair in index:
            errors.append(
                f"{entry.from_species.value} -> {entry.to_species.value}: "
                f"duplicate entry"
            )
            continue
        index[entry.pair] = entry.modifier

    if errors:
        raise BiasTableValidationError(
            "Bias table validation failed:\n  " + "\n  ".join(errors)
        )

    return index


def validate_tier_ranges(ranges: Iterable[TierRange]) -> List[TierRange]:
    """
    Validate tier ranges and return them sorted by lower bound.

    Args:
        ranges: Tier ranges in any order

    Returns:
        Ranges sorted ascending by lower_bound

    Raises:
        TierConfigValidationError: On empty labels, non-integer or duplicate bounds
    """
    errors: List[str] = []
    seen_bounds = set()
    seen_labels = set()
    valid: List[TierRange] = []

    for tier in ranges:
        if not isinstance(tier.label, str):
            errors.append(
                f"tier at {tier.lower_bound!r}: label must be a string, got {tier.label!r}"
            )
            continue
        if not tier.label.strip():
            errors.append(f"tier at {tier.lower_bound!r}: label must not be empty")
            continue
        if not _is_int(tier.lower_bound):
            errors.append(
                f"tier '{tier.label}': lower_bound must be an integer, "
                f"got {tier.lower_bound!r}"
            )
            continue
        if tier.lower_bound in seen_bounds:
            errors.append(f"tier '{tier.label}': duplicate lower_bound {tier.lower_bound}")
            continue
        if tier.label in seen_labels:
            errors.append(f"tier '{tier.label}': duplicate label")
            continue
        seen_bounds.add(tier.lower_bound)
        seen_labels.add(tier.label)
        valid.append(tier)

    if errors:
        raise TierConfigValidationError(
            "Tier config validation failed:\n  " + "\n  ".join(errors)
        )

    return sorted(valid, key=lambda t: t.lower_bound)
