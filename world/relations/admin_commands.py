"""
Admin commands for relations debugging.

These are not full engine commands, but the logic that would be called by
command handlers. Each returns a formatted string.
"""

from collections import Counter
from typing import List

from world.relations.bias import BiasTable
from world.relations.core import CharacterIdentity, Species
from world.relations.system import RelationshipSystem


def _tier(system: RelationshipSystem, value: int) -> str:
    if system.tiers is None:
        return "no tiers"
    return system.tiers.classify(value)


def cmd_relations_inspect(
    system: RelationshipSystem,
    character: CharacterIdentity
) -> str:
    """
    Admin command: relations/inspect <character>

    Show how a character regards everyone, and how everyone regards them.

    Args:
        system: Relationship system to query
        character: Character to inspect

    Returns:
        Formatted string for admin display
    """
    outgoing = system.store.relations_from(character)
    incoming = system.store.relations_to(character)

    output = []
    output.append(f"Relations Inspection: {character.label}")
    output.append(f"  Character ID: {character.character_id}")
    output.append(f"  Species: {character.species.value}")
    output.append("")

    output.append("Feels toward:")
    if outgoing:
        for other, value in sorted(outgoing.items(), key=lambda x: x[1], reverse=True):
            output.append(f"  {other.label}: {value} ({_tier(system, value)})")
    else:
        output.append("  (no relationships found)")

    output.append("")
    output.append("Regarded by:")
    if incoming:
        for other, value in sorted(incoming.items(), key=lambda x: x[1], reverse=True):
            output.append(f"  {other.label}: {value} ({_tier(system, value)})")
    else:
        output.append("  (no relationships found)")

    return "\n".join(output)


def cmd_relations_bias(
    bias: BiasTable,
    from_species: Species,
    to_species: Species
) -> str:
    """
    Admin command: relations/bias <species> <species>

    Show the bias modifiers between two species in both directions.
    """
    forward = bias.lookup(from_species, to_species)
    backward = bias.lookup(to_species, from_species)

    output = []
    output.append(f"Species Bias: {from_species.value} / {to_species.value}")
    output.append(f"  {from_species.value} -> {to_species.value}: {forward:+d}")
    output.append(f"  {to_species.value} -> {from_species.value}: {backward:+d}")
    if forward != backward:
        output.append("  (asymmetric)")

    return "\n".join(output)


def cmd_relations_summary(system: RelationshipSystem) -> str:
    """
    Admin command: relations/summary

    Show summary statistics for all stored relationships.
    """
    values: List[int] = [value for _, value in system.store.items()]

    output = []
    output.append("Relations Summary")
    output.append(f"  Roster: {len([c for c in system.roster if c is not None])} characters")
    output.append(f"  Stored pairs: {len(system.store)}")
    output.append(f"  Bias table: {'yes' if system.bias is not None else 'none'}")
    output.append("")

    if not values:
        output.append("  (no relationships stored)")
        return "\n".join(output)

    output.append("Values:")
    output.append(f"  Min: {min(values)}")
    output.append(f"  Max: {max(values)}")
    output.append(f"  Mean: {sum(values) / len(values):.1f}")
    output.append("")

    if system.tiers is not None and system.tiers.configured:
        counts = Counter(system.tiers.classify(v) for v in values)
        output.append("Tier Distribution:")
        unknown = [] if system.tiers.unknown_label in system.tiers.labels else [system.tiers.unknown_label]
        for label in system.tiers.labels + unknown:
            if counts.get(label):
                output.append(f"  {label}: {counts[label]}")
    else:
        output.append("Tier Distribution: no tier config")

    return "\n".join(output)
