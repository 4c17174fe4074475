"""
Relations System - directed character affinity for narrative games

Characters hold clamped [1, 100] affinity toward each other, seeded from a
species bias table and classified into named tiers.
"""

from world.relations.core import (
    Species,
    BiasEntry,
    CharacterIdentity,
    TierRange,
    RelationshipChange,
)
from world.relations.bias import (
    BiasTable,
    POLITICAL_MODIFIERS,
    generate_bias_entries,
    default_bias_table,
)
from world.relations.store import AffinityStore
from world.relations.tiers import TierClassifier
from world.relations.system import RelationshipSystem
from world.relations.conditions import (
    RelationshipTierCondition,
    RelationshipConsequence,
)

__all__ = [
    # Core data structures
    "Species",
    "BiasEntry",
    "CharacterIdentity",
    "TierRange",
    "RelationshipChange",
    # Bias
    "BiasTable",
    "POLITICAL_MODIFIERS",
    "generate_bias_entries",
    "default_bias_table",
    # Store and tiers
    "AffinityStore",
    "TierClassifier",
    # Service
    "RelationshipSystem",
    "RelationshipTierCondition",
    "RelationshipConsequence",
]
