"""Shared fixtures for the clusteranalysis test suite."""

import matplotlib

matplotlib.use('Agg')

import numpy as np
import pytest


@pytest.fixture()
def four_points() -> np.ndarray:
    """Two tight pairs ten units apart."""
    return np.array([[0.0, 0.0], [0.0, 1.0], [10.0, 0.0], [10.0, 1.0]])


@pytest.fixture()
def blobs():
    """Three unit-variance blobs of 50 points, 20 units apart, with true labels."""
    rng = np.random.RandomState(0)
    centers = [(0.0, 0.0), (20.0, 0.0), (0.0, 20.0)]
    X = np.vstack([rng.randn(50, 2) + center for center in centers])
    y = np.repeat(np.arange(3), 50)
    return X, y
