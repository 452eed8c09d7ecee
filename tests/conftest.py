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
def knn_basic():
    """Two well-separated 2-D classes as a point-major buffer."""
    data = [1, 101, 5, 89, 108, 5, 115, 8]
    labels = ['A', 'A', 'B', 'B']
    return data, labels


@pytest.fixture
def two_clusters(rng):
    """Clusters around (3, 3) labeled 1 and (9, 8) labeled 2, 20 points each."""
    n_per = 20
    X = np.vstack([
        rng.normal([3.0, 3.0], 0.5, size=(n_per, 2)),
        rng.normal([9.0, 8.0], 0.5, size=(n_per, 2)),
    ])
    labels = [1] * n_per + [2] * n_per
    return X, labels


@pytest.fixture
def correlated_data(rng):
    """100 points in 4-D with decreasing variance per latent axis."""
    latent = rng.standard_normal((100, 4)) * np.array([5.0, 2.0, 1.0, 0.2])
    rotation, _ = np.linalg.qr(rng.standard_normal((4, 4)))
    return latent @ rotation.T + np.array([10.0, -3.0, 0.5, 7.0])
