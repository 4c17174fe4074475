"""
Pytest configuration for relations system tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# =============================================================================
# VALIDATION ON TEST RUN
# =============================================================================

def pytest_configure(config):
    """
    Validate the shipped YAML data before running tests.

    This ensures a bad bias table or tier config can't ship - validation
    errors surface as test collection failures.
    """
    from world.relations.config import (
        load_bias_table_from_yaml,
        load_config_from_yaml,
        load_tier_config_from_yaml,
    )

    config_dir = project_root / "config"
    try:
        load_config_from_yaml(config_dir / "relations_defaults.yaml")
        load_bias_table_from_yaml(config_dir / "species_bias.yaml")
        load_tier_config_from_yaml(config_dir / "relationship_tiers.yaml")
    except (FileNotFoundError, ValueError) as e:
        pytest.fail(f"Relations config validation failed:\n{e}", pytrace=False)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def config_dir():
    """Directory holding the shipped YAML data."""
    return project_root / "config"


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    from world.relations.config import reset_config
    reset_config()
    yield
    reset_config()
