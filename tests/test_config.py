"""Tests for KMeansConfig validation and random-state handling."""

import dataclasses

import numpy as np
import pytest

from clusteranalysis.config import (KMeansConfig, check_random_state,
                                    resolve_init)
from clusteranalysis.errors import InvalidArgument


class TestValidate:
    def test_defaults_are_valid(self) -> None:
        config = KMeansConfig(n_clusters=2).validate(10)
        assert config.nstart == 1
        assert config.maxiter == 10
        assert config.init_method == 'kmeans++'

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n_clusters": 0},
            {"n_clusters": 11},
            {"n_clusters": 2.5},
            {"n_clusters": True},
            {"n_clusters": 2, "nstart": 0},
            {"n_clusters": 2, "maxiter": 0},
            {"n_clusters": 2, "tol": -1.0},
            {"n_clusters": 2, "tol": float("nan")},
            {"n_clusters": 2, "tol": float("inf")},
            {"n_clusters": 2, "init": "kmedoids"},
        ],
    )
    def test_invalid_settings_raise(self, kwargs) -> None:
        with pytest.raises(InvalidArgument):
            KMeansConfig(**kwargs).validate(10)

    def test_k_equal_to_n_is_allowed(self) -> None:
        KMeansConfig(n_clusters=10).validate(10)

    def test_is_frozen(self) -> None:
        config = KMeansConfig(n_clusters=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.n_clusters = 3  # type: ignore[misc]


class TestResolveInit:
    def test_kmpp_alias(self) -> None:
        assert resolve_init('kmpp') == 'kmeans++'

    def test_random(self) -> None:
        assert resolve_init('random') == 'random'

    @pytest.mark.parametrize("init", ["Random", "", None, 3])
    def test_unknown_raises(self, init) -> None:
        with pytest.raises(InvalidArgument):
            resolve_init(init)


class TestCheckRandomState:
    def test_int_seed_is_reproducible(self) -> None:
        a = check_random_state(5).rand(3)
        b = check_random_state(5).rand(3)
        np.testing.assert_array_equal(a, b)

    def test_instance_passes_through(self) -> None:
        rng = np.random.RandomState(1)
        assert check_random_state(rng) is rng

    def test_none_gives_generator(self) -> None:
        assert isinstance(check_random_state(None), np.random.RandomState)

    def test_bad_seed_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            check_random_state("seed")
