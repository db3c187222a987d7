"""Tests for the within-cluster sum of squares."""

import numpy as np
import pytest

from clusteranalysis.objective import squared_error, total_within_ss


class TestSquaredError:
    def test_column(self) -> None:
        assert squared_error([1.0, 2.0, 3.0]) == pytest.approx(2.0)

    def test_single_value_is_zero(self) -> None:
        assert squared_error([5.0]) == 0.0

    def test_empty_column_is_zero(self) -> None:
        assert squared_error([]) == 0.0

    def test_matrix_sums_over_columns(self) -> None:
        # column 0 contributes 0, column 1 contributes 0.25 + 0.25
        assert squared_error([[0.0, 0.0], [0.0, 1.0]]) == pytest.approx(0.5)


class TestTotalWithinSS:
    def test_two_pairs(self, four_points) -> None:
        assert total_within_ss(four_points, 2, [0, 0, 1, 1]) == pytest.approx(1.0)

    def test_empty_cluster_contributes_nothing(self, four_points) -> None:
        assert total_within_ss(four_points, 3, [0, 0, 2, 2]) == pytest.approx(1.0)

    def test_single_cluster_is_total_spread(self, four_points) -> None:
        # column 0: 4 * 5² = 100, column 1: 4 * 0.5² = 1
        assert total_within_ss(four_points, 1, [0, 0, 0, 0]) == pytest.approx(101.0)

    def test_singletons_are_zero(self, four_points) -> None:
        assert total_within_ss(four_points, 4, [0, 1, 2, 3]) == 0.0

    def test_non_negative(self, blobs) -> None:
        X, _ = blobs
        labels = np.arange(len(X)) % 4
        assert total_within_ss(X, 4, labels) >= 0.0
