"""Tests for the Euclidean distance helpers."""

import tracemalloc

import numpy as np
import pytest

from clusteranalysis.distance import centroid_norms, euclidean, pairwise_distances
from clusteranalysis.errors import DimensionMismatch


class TestEuclidean:
    def test_three_four_five(self) -> None:
        assert euclidean([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)

    def test_identical_vectors_are_zero_apart(self) -> None:
        assert euclidean([1.5, -2.0, 7.0], [1.5, -2.0, 7.0]) == 0.0

    def test_symmetric(self) -> None:
        a, b = [1.0, 2.0, 3.0], [-4.0, 0.5, 9.0]
        assert euclidean(a, b) == pytest.approx(euclidean(b, a))

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(DimensionMismatch):
            euclidean([1.0, 2.0], [1.0, 2.0, 3.0])

    def test_mismatch_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            euclidean([1.0], [1.0, 2.0])

    def test_nan_propagates(self) -> None:
        assert np.isnan(euclidean([np.nan, 0.0], [0.0, 0.0]))


class TestPairwiseDistances:
    def test_shape_and_values(self) -> None:
        X = np.array([[0.0, 0.0], [3.0, 4.0], [6.0, 8.0]])
        C = np.array([[0.0, 0.0], [6.0, 8.0]])
        D = pairwise_distances(X, C)
        assert D.shape == (3, 2)
        np.testing.assert_allclose(D, [[0.0, 10.0], [5.0, 5.0], [10.0, 0.0]])

    def test_matches_scalar_euclidean(self) -> None:
        rng = np.random.RandomState(0)
        X, C = rng.randn(6, 3), rng.randn(2, 3)
        D = pairwise_distances(X, C)
        for i in range(6):
            for k in range(2):
                assert D[i, k] == pytest.approx(euclidean(X[i], C[k]))

    def test_feature_mismatch_raises(self) -> None:
        with pytest.raises(DimensionMismatch):
            pairwise_distances(np.zeros((3, 2)), np.zeros((2, 3)))


def test_centroid_norms() -> None:
    np.testing.assert_allclose(centroid_norms([[3.0, 4.0], [0.0, 0.0]]), [5.0, 0.0])


def test_euclidean_rejects_matrices() -> None:
    with pytest.raises(DimensionMismatch):
        euclidean([[1.0, 2.0], [3.0, 4.0]], [1.0, 2.0, 3.0, 4.0])


def test_pairwise_distances_memory_is_linear() -> None:
    rng = np.random.RandomState(0)
    X, C = rng.randn(20000, 20), rng.randn(50, 20)
    tracemalloc.start()
    try:
        pairwise_distances(X, C)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    # a full (n, K, d) difference array would be 160 MB
    assert peak < 50e6
