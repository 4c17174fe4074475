#!/usr/bin/env python3
"""Relations scene sim: a small cast, a few dialogue beats, tier checks.

This is a lightweight, engine-free simulation that demonstrates:
- loading settings, species bias and tiers from config/*.yaml
- initializing a cast and reading starting affinity
- dialogue consequences (one-way and mutual)
- a tier condition gating an event

Run:
  source .venv/bin/activate
  python scripts/relations_scene_sim.py
"""

from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import List

# Ensure repo root is on sys.path when running as a script
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from world.relations.admin_commands import cmd_relations_inspect, cmd_relations_summary
from world.relations.conditions import RelationshipConsequence, RelationshipTierCondition
from world.relations.config import (
    load_bias_table_from_yaml,
    load_config_from_yaml,
    load_tier_config_from_yaml,
    reset_config,
    set_config,
)
from world.relations.core import CharacterIdentity, Species
from world.relations.system import RelationshipSystem


def build_cast() -> List[CharacterIdentity]:
    return [
        CharacterIdentity("aria", Species.HUMAN, "Aria"),
        CharacterIdentity("lithien", Species.ELF, "Lithien"),
        CharacterIdentity("vor", Species.DEMON, "Vor"),
        CharacterIdentity("brakka", Species.DWARF, "Brakka"),
    ]


def simulate(seed: int = 7, beats: int = 6) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config_dir = project_root / "config"

    set_config(load_config_from_yaml(config_dir / "relations_defaults.yaml"))
    system = RelationshipSystem(
        roster=build_cast(),
        bias=load_bias_table_from_yaml(config_dir / "species_bias.yaml"),
        tiers=load_tier_config_from_yaml(config_dir / "relationship_tiers.yaml"),
    )
    aria, lithien, vor, brakka = system.roster

    print(cmd_relations_summary(system))
    print()

    rng = random.Random(seed)
    cast = [aria, lithien, vor, brakka]
    for beat in range(1, beats + 1):
        speaker, listener = rng.sample(cast, 2)
        consequence = RelationshipConsequence(
            speaker, listener, rng.choice([-15, -5, 5, 10, 20]), mutual=rng.random() < 0.3
        )
        consequence.execute(system)
        print(f"[beat {beat}] {consequence.describe()}")

    # Vor only opens up once Aria is at least Neutral toward them
    gate = RelationshipTierCondition(aria, vor, "Neutral")
    print()
    print(f"{gate.describe()}: {'open' if gate.evaluate(system) else 'closed'}")
    print()
    print(cmd_relations_inspect(system, aria))

    reset_config()
    return 0


if __name__ == "__main__":
    raise SystemExit(simulate())
