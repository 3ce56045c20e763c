"""
Pytest configuration and shared fixtures for binmerkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

generate_random_string = _common.generate_random_string
make_random_elements = _common.make_random_elements
LITERAL_ELEMENTS = _common.LITERAL_ELEMENTS

from binmerkle.config.runtime import set_default_config
from binmerkle.merkle import build_merkle_tree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def _reset_runtime_config():
    """Each test starts from the environment-derived default config."""
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def literal_elements():
    """The three-element list used throughout the examples."""
    return list(LITERAL_ELEMENTS)


@pytest.fixture
def literal_tree(literal_elements):
    """Tree over ["some", "test", "elements"] (padded to four leaves)."""
    return build_merkle_tree(literal_elements)


@pytest.fixture
def random_elements():
    """Provide 1000 pseudo-random 10-character strings."""
    return make_random_elements(1000, 10)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
