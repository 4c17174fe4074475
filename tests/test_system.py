"""
Tests for the relationship service.

See world/relations/system.py for implementation.
"""

import logging

from world.relations.bias import default_bias_table
from world.relations.core import RelationshipChange, Species
from world.relations.store import AffinityStore
from world.relations.system import RelationshipSystem
from world.relations.tiers import TierClassifier
from tests.helpers import example_tiers, make_roster


def create_test_system(*species):
    """Create a fully configured system for the given species."""
    roster = make_roster(*species)
    system = RelationshipSystem(roster=roster, bias=default_bias_table(), tiers=example_tiers())
    return system, roster


def test_system_initializes_store():
    """Construction initializes relationships for the roster."""
    system, (human, elf, demon) = create_test_system(Species.HUMAN, Species.ELF, Species.DEMON)

    assert len(system.store) == 6
    assert system.get_relationship(human, elf) == 55
    assert system.get_relationship(human, demon) == 25


def test_clean_configuration_has_no_issues(caplog):
    """A complete configuration validates cleanly."""
    with caplog.at_level(logging.INFO, logger="world.relations.system"):
        system, _ = create_test_system(Species.HUMAN, Species.ELF)

    assert system.validate_configuration() == []
    assert "validated successfully" in caplog.text


def test_missing_configuration_is_logged(caplog):
    """Missing bias, tiers and roster are warnings, not errors."""
    with caplog.at_level(logging.WARNING, logger="world.relations.system"):
        system = RelationshipSystem()

    assert len(system.store) == 0
    assert "No bias table configured" in caplog.text
    assert "No tier config configured" in caplog.text
    assert "Roster is empty" in caplog.text


def test_none_roster_entries_are_reported(caplog):
    """None entries are counted in the warning and skipped."""
    a, b = make_roster(Species.HUMAN, Species.ELF)
    with caplog.at_level(logging.WARNING, logger="world.relations.system"):
        system = RelationshipSystem(roster=[a, None, b, None], bias=default_bias_table(),
                                    tiers=example_tiers())

    assert "2 empty entries" in caplog.text
    assert len(system.store) == 2


def test_modify_relationship():
    """modify_relationship delegates to the store with clamping."""
    system, (human, demon) = create_test_system(Species.HUMAN, Species.DEMON)

    system.modify_relationship(human, demon, -30)

    assert system.get_relationship(human, demon) == 1
    assert system.get_relationship(demon, human) == 25


def test_get_relationship_tier():
    """Tier follows the live value."""
    system, (human, elf) = create_test_system(Species.HUMAN, Species.ELF)

    assert system.get_relationship_tier(human, elf) == "Neutral"

    system.modify_relationship(human, elf, 20)
    assert system.get_relationship_tier(human, elf) == "Friendly"
    assert system.get_relationship_tier(elf, human) == "Neutral"


def test_get_relationship_tier_without_config(caplog):
    """No tier config degrades to 'Unknown'."""
    roster = make_roster(Species.HUMAN, Species.ELF)
    system = RelationshipSystem(roster=roster, bias=default_bias_table())

    with caplog.at_level(logging.WARNING, logger="world.relations.system"):
        assert system.get_relationship_tier(*roster) == "Unknown"
    assert system.get_tier_index("Neutral") == -1
    assert "No tier config" in caplog.text


def test_get_tier_index():
    """Tier indices come from the tier config."""
    system, _ = create_test_system(Species.HUMAN)

    assert system.get_tier_index("Hostile") == 0
    assert system.get_tier_index("Friendly") == 2
    assert system.get_tier_index("Unknown") == -1


def test_reinitialize_with_new_roster():
    """Reinitialize rebuilds for the new roster with the same bias table."""
    system, (human, elf) = create_test_system(Species.HUMAN, Species.ELF)
    system.modify_relationship(human, elf, 30)
    (dwarf,) = make_roster(Species.DWARF)

    system.reinitialize([human, elf, dwarf])

    assert len(system.store) == 6
    assert system.get_relationship(human, elf) == 55
    assert system.get_relationship(dwarf, human) == 60


def test_reinitialize_empty_roster_clears(caplog):
    """An empty roster empties the store and logs a warning."""
    system, (human, elf) = create_test_system(Species.HUMAN, Species.ELF)

    with caplog.at_level(logging.WARNING, logger="world.relations.system"):
        system.reinitialize([])

    assert len(system.store) == 0
    assert system.get_relationship(human, elf) == 50
    assert "empty roster" in caplog.text


def test_apply_changes():
    """Authored changes apply in order, one direction by default."""
    system, (human, elf) = create_test_system(Species.HUMAN, Species.ELF)

    system.apply_changes([
        RelationshipChange(human, elf, 10),
        RelationshipChange(human, elf, -3),
    ])

    assert system.get_relationship(human, elf) == 62
    assert system.get_relationship(elf, human) == 55


def test_apply_changes_mutual():
    """Mutual changes apply both ways."""
    system, (human, elf) = create_test_system(Species.HUMAN, Species.ELF)

    system.apply_changes([RelationshipChange(human, elf, 10)], mutual=True)

    assert system.get_relationship(human, elf) == 65
    assert system.get_relationship(elf, human) == 65


def test_system_uses_injected_store():
    """A store passed in is the one that gets initialized."""
    store = AffinityStore()
    roster = make_roster(Species.HUMAN, Species.DEMON)
    system = RelationshipSystem(roster=roster, bias=default_bias_table(),
                                tiers=TierClassifier([(1, "Any")]), store=store)

    assert system.store is store
    assert store.get(*roster) == 25
    assert store.bias is system.bias
