"""
Run settings for K-means and the checks applied to them.

Everything here is validated up front so that a bad argument fails before
any centroid is drawn.
"""

import numbers
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from clusteranalysis.errors import InvalidArgument

# "kmpp" is the short name the method has always been known by.
INIT_METHODS = {
    'random': 'random',
    'kmeans++': 'kmeans++',
    'kmpp': 'kmeans++',
}

DEFAULT_TOL = 1e-10


def resolve_init(init):
    """Map an init identifier to its canonical name, or raise InvalidArgument."""
    try:
        return INIT_METHODS[init]
    except (KeyError, TypeError):
        raise InvalidArgument(
            f"Unknown init method: {init!r}. "
            f"Use one of {sorted(INIT_METHODS)}."
        ) from None


def check_random_state(seed):
    """
    Turn `seed` into a np.random.RandomState.

    None gives a fresh unseeded generator, an int seeds a new one, and an
    existing RandomState is returned unchanged.
    """
    if seed is None:
        return np.random.RandomState()
    if isinstance(seed, np.random.RandomState):
        return seed
    if isinstance(seed, numbers.Integral) and not isinstance(seed, bool):
        return np.random.RandomState(int(seed))
    raise InvalidArgument(f"Cannot seed a random generator from {seed!r}")


def _is_int(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class KMeansConfig:
    """
    Settings for one `kmeans` call.

    n_clusters : number of clusters K
    nstart : number of independent restarts; the best one is kept
    maxiter : iteration budget per restart (the initial assignment counts as 1)
    init : 'kmeans++' (alias 'kmpp') or 'random'
    tol : how close to zero the shift in centroid norms must be to stop
    random_state : None, int seed or np.random.RandomState
    """

    n_clusters: int
    nstart: int = 1
    maxiter: int = 10
    init: str = 'kmeans++'
    tol: float = DEFAULT_TOL
    random_state: Optional[Union[int, np.random.RandomState]] = None

    def validate(self, n_samples):
        """Check every setting against a matrix with `n_samples` rows."""
        if not _is_int(self.n_clusters) or self.n_clusters < 1:
            raise InvalidArgument(
                f"K must be a positive integer, got {self.n_clusters!r}"
            )
        if self.n_clusters > n_samples:
            raise InvalidArgument(
                f"K ({self.n_clusters}) cannot exceed the number of "
                f"observations ({n_samples})"
            )
        if not _is_int(self.nstart) or self.nstart < 1:
            raise InvalidArgument(f"nstart must be >= 1, got {self.nstart!r}")
        if not _is_int(self.maxiter) or self.maxiter < 1:
            raise InvalidArgument(f"maxiter must be >= 1, got {self.maxiter!r}")
        if (not isinstance(self.tol, numbers.Real) or not np.isfinite(self.tol)
                or self.tol < 0):
            raise InvalidArgument(f"tol must be a finite non-negative number, got {self.tol!r}")
        resolve_init(self.init)
        return self

    @property
    def init_method(self):
        return resolve_init(self.init)
