"""
Configuration for the relations system.

Tunable numbers live here and in config/*.yaml, not in code.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from world.relations.bias import BiasTable
from world.relations.core import (
    BASE_VALUE,
    MAX_VALUE,
    MIN_VALUE,
    SAME_SPECIES_BONUS,
    UNKNOWN_TIER,
    TierRange,
)
from world.relations.tiers import TierClassifier
from world.relations.validation import RelationsConfigError


@dataclass(frozen=True)
class RelationsConfig:
    """Value bounds and defaults for affinity."""
    base_value: int
    min_value: int
    max_value: int
    same_species_bonus: int
    unknown_tier: str

    def __post_init__(self):
        if not self.min_value <= self.base_value <= self.max_value:
            raise RelationsConfigError(
                f"base_value {self.base_value} must lie within "
                f"[{self.min_value}, {self.max_value}]"
            )


_DEFAULT_CONFIG = RelationsConfig(
    base_value=BASE_VALUE,
    min_value=MIN_VALUE,
    max_value=MAX_VALUE,
    same_species_bonus=SAME_SPECIES_BONUS,
    unknown_tier=UNKNOWN_TIER,
)

# Active configuration (can be replaced at runtime)
_active_config: RelationsConfig = _DEFAULT_CONFIG


def get_config() -> RelationsConfig:
    """Get the active relations configuration."""
    return _active_config


def set_config(config: RelationsConfig) -> None:
    """Set the active relations configuration."""
    global _active_config
    _active_config = config


def reset_config() -> None:
    """Reset to default configuration."""
    global _active_config
    _active_config = _DEFAULT_CONFIG


# =============================================================================
# YAML LOADING
# =============================================================================

def _read_yaml(path: Union[str, Path]) -> Any:
    """Read and parse a YAML file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML in {config_path}: {e}") from e


def _require(data: Dict[str, Any], key: str, context: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required field '{key}' in {context}")
    return data[key]


def load_config_from_yaml(path: Union[str, Path]) -> RelationsConfig:
    """
    Load relations settings from a YAML file.

    Expected shape:
        affinity:
          base_value: 50
          min_value: 1
          max_value: 100
          same_species_bonus: 15
        unknown_tier: Unknown

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed or a field is missing
    """
    data = _read_yaml(path)
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a dictionary")

    affinity = _require(data, "affinity", str(path))
    if not isinstance(affinity, dict):
        raise ValueError("Field 'affinity' must be a dictionary")

    return RelationsConfig(
        base_value=int(_require(affinity, "base_value", "affinity")),
        min_value=int(_require(affinity, "min_value", "affinity")),
        max_value=int(_require(affinity, "max_value", "affinity")),
        same_species_bonus=int(affinity.get("same_species_bonus", SAME_SPECIES_BONUS)),
        unknown_tier=str(data.get("unknown_tier", UNKNOWN_TIER)),
    )


def load_bias_table_from_yaml(path: Union[str, Path]) -> BiasTable:
    """
    Load a bias table from a YAML file.

    Expected shape (row feels about column):
        human:
          elf: 5
          demon: -25

    An empty file yields an empty table.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed
        UnknownSpeciesError: If a species name is not recognised
        BiasTableValidationError: If a modifier is not an integer
    """
    data = _read_yaml(path)
    if data is None:
        return BiasTable()
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a dictionary of species rows")

    for species_name, row in data.items():
        if row is not None and not isinstance(row, dict):
            raise ValueError(f"Bias row for '{species_name}' must be a dictionary")

    return BiasTable.from_mapping(data)


def load_tier_config_from_yaml(path: Union[str, Path]) -> TierClassifier:
    """
    Load tier ranges from a YAML file.

    Expected shape:
        tiers:
          - lower_bound: 1
            label: Hostile
          - lower_bound: 40
            label: Neutral

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is malformed or a field is missing
        TierConfigValidationError: On duplicate bounds or empty labels
    """
    data = _read_yaml(path)
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a dictionary")

    raw_tiers = _require(data, "tiers", str(path))
    if not isinstance(raw_tiers, list):
        raise ValueError("Field 'tiers' must be a list")

    ranges: List[TierRange] = []
    for i, item in enumerate(raw_tiers):
        if not isinstance(item, dict):
            raise ValueError(f"Tier #{i} must be a dictionary")
        ranges.append(TierRange(
            lower_bound=_require(item, "lower_bound", f"tier #{i}"),
            label=_require(item, "label", f"tier #{i}"),
        ))

    unknown = data.get("unknown_tier", get_config().unknown_tier)
    return TierClassifier(ranges, unknown_label=str(unknown))
