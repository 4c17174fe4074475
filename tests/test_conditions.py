"""
Tests for relationship event conditions and consequences.

See world/relations/conditions.py for implementation.
"""

import logging

from world.relations.bias import default_bias_table
from world.relations.conditions import RelationshipConsequence, RelationshipTierCondition
from world.relations.core import Species
from world.relations.system import RelationshipSystem
from tests.helpers import example_tiers, make_roster


def create_test_system():
    """Human and Elf (55 both ways) plus a Demon (25 both ways with Human)."""
    roster = make_roster(Species.HUMAN, Species.ELF, Species.DEMON)
    system = RelationshipSystem(roster=roster, bias=default_bias_table(), tiers=example_tiers())
    return system, roster


def test_condition_passes_at_required_tier():
    """Current tier equal to the required tier passes."""
    system, (human, elf, _) = create_test_system()

    condition = RelationshipTierCondition(human, elf, "Neutral")

    assert condition.evaluate(system)


def test_condition_passes_above_required_tier():
    """A stronger tier than required passes."""
    system, (human, elf, _) = create_test_system()
    system.modify_relationship(human, elf, 30)

    assert RelationshipTierCondition(human, elf, "Neutral").evaluate(system)


def test_condition_fails_below_required_tier():
    """A weaker tier fails."""
    system, (human, _, demon) = create_test_system()

    assert not RelationshipTierCondition(human, demon, "Neutral").evaluate(system)


def test_condition_missing_character_fails(caplog):
    """Missing characters fail with a warning."""
    system, (human, _, _) = create_test_system()

    with caplog.at_level(logging.WARNING, logger="world.relations.conditions"):
        assert not RelationshipTierCondition(human, None, "Neutral").evaluate(system)
    assert "no from or to character" in caplog.text


def test_condition_empty_required_tier_fails():
    """An empty required tier never passes."""
    system, (human, elf, _) = create_test_system()

    assert not RelationshipTierCondition(human, elf, "").evaluate(system)


def test_condition_unknown_required_tier_fails(caplog):
    """A tier name missing from the config fails with a warning."""
    system, (human, elf, _) = create_test_system()

    with caplog.at_level(logging.WARNING, logger="world.relations.conditions"):
        assert not RelationshipTierCondition(human, elf, "Beloved").evaluate(system)
    assert "Required tier 'Beloved'" in caplog.text


def test_condition_without_tier_config_fails():
    """Without tiers the current tier is unknown."""
    roster = make_roster(Species.HUMAN, Species.ELF)
    system = RelationshipSystem(roster=roster, bias=default_bias_table())

    assert not RelationshipTierCondition(*roster, "Neutral").evaluate(system)


def test_condition_describe():
    """describe() names both characters and the tier."""
    human, elf = make_roster(Species.HUMAN, Species.ELF)

    text = RelationshipTierCondition(human, elf, "Friendly").describe()

    assert text == "Relationship Human 0 -> Elf 1 >= tier 'Friendly'"
    assert "? ->" in RelationshipTierCondition(None, elf, "Friendly").describe()


def test_consequence_one_direction():
    """A consequence shifts only from -> to by default."""
    system, (human, elf, _) = create_test_system()

    RelationshipConsequence(human, elf, 10).execute(system)

    assert system.get_relationship(human, elf) == 65
    assert system.get_relationship(elf, human) == 55


def test_consequence_mutual():
    """A mutual consequence shifts both directions."""
    system, (human, _, demon) = create_test_system()

    RelationshipConsequence(human, demon, -40, mutual=True).execute(system)

    assert system.get_relationship(human, demon) == 1
    assert system.get_relationship(demon, human) == 1


def test_consequence_missing_character_is_skipped():
    """Missing characters change nothing."""
    system, (human, _, _) = create_test_system()
    before = system.store.snapshot()

    RelationshipConsequence(None, human, 10).execute(system)

    assert system.store.snapshot() == before


def test_consequence_then_condition():
    """A consequence can unlock a later tier check."""
    system, (human, elf, _) = create_test_system()
    condition = RelationshipTierCondition(human, elf, "Friendly")

    assert not condition.evaluate(system)
    RelationshipConsequence(human, elf, 15).execute(system)
    assert condition.evaluate(system)


def test_consequence_describe():
    """describe() shows a signed delta and the mutual flag."""
    human, elf = make_roster(Species.HUMAN, Species.ELF)

    assert RelationshipConsequence(human, elf, 5).describe() == "Relationship Human 0 -> Elf 1 +5"
    assert RelationshipConsequence(human, elf, -5, mutual=True).describe() == \
        "Relationship Human 0 -> Elf 1 -5 (Mutual)"
    assert RelationshipConsequence(human, elf, 0).describe() == "Relationship Human 0 -> Elf 1 0"
