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
def correlated_matrix(rng):
    """50 x 4 matrix with two strongly correlated column pairs."""
    n = 50
    a = rng.standard_normal(n)
    b = rng.standard_normal(n)
    X = np.column_stack([
        10.0 + 2.0 * a,
        -3.0 + 4.0 * a + 0.1 * rng.standard_normal(n),
        100.0 + 0.5 * b,
        b + 0.05 * rng.standard_normal(n),
    ])
    return X


@pytest.fixture
def survival_sample(rng):
    """Random right-censored sample with ties (integer times)."""
    n = 60
    time = rng.integers(1, 15, size=n).astype(np.float64)
    status = (rng.random(n) < 0.7).astype(np.float64)
    return status, time
