"""
Pytest Configuration
====================

Automatically loaded by pytest. Adds src/ to sys.path
so `vectorize` is importable without installation. After
`pip install -e .[test]` the path setup is a no-op duplicate of the
installed package location.

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

import numpy as np
import pytest


def pytest_configure(config):
    """Add src/ to path before any imports happen."""
    src_root = Path(__file__).parent
    if str(src_root) not in sys.path:
        sys.path.insert(0, str(src_root))


# Also do it at module level for non-pytest usage (uninstalled checkouts only)
src_root = Path(__file__).parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


@pytest.fixture
def rng():
    """Seeded generator, fresh per test (reproducible sampling)."""
    from vectorize.spec.constants import DEFAULT_SEED
    return np.random.default_rng(DEFAULT_SEED)
