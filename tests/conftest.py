"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def untied_samples():
    """Two 10-observation samples with no value shared across or within them."""
    x = np.arange(1.0, 11.0)
    y = np.arange(5.5, 15.5)
    return x, y
