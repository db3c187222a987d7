"""
K-MEANS CLUSTERING — Paradigm: CENTROID PARTITIONING

===============================================================
WHAT IT IS (THE CORE IDEA)
===============================================================

Partition n observations into K clusters by finding K centroids that
minimize the total within-cluster sum of squares:

    argmin  Σₖ Σ_{x∈Cₖ} ||x - μₖ||²

THE ALGORITHM (Lloyd's iteration):
    1. Initialize K centroids (random rows, or K-means++ seeding)
    2. ASSIGN: each observation → nearest centroid
    3. UPDATE: each centroid → mean of its observations
    4. Repeat 2-3 until the centroid norms stop moving, or the
       iteration budget runs out

Repeat the whole thing `nstart` times and keep the restart with the
lowest objective. K-means only finds LOCAL minima; restarts are the
cheap way out of a bad one.

===============================================================
K-MEANS++ SEEDING (farthest-point flavour)
===============================================================

    1. First centroid: a row chosen uniformly at random
    2. Each next centroid: the row whose distance to its NEAREST
       already-chosen centroid is LARGEST

This is the deterministic greedy variant. The textbook version samples
the next row with probability ∝ D(x)²; here we take the argmax, which
spreads the seeds as far apart as the data allows.

===============================================================
POLICIES
===============================================================

- EMPTY CLUSTER: a centroid that receives no observations keeps its
  previous position.
- TIES: an observation equidistant from several centroids goes to the
  lowest index.
- RETENTION: the update rule is a heuristic here, so a later iterate is
  not assumed to be better. Each run keeps the iterate with the lowest
  objective (the latest one on ties), and the loop carries on from the
  latest iterate.
- CONVERGENCE: stop when the Euclidean distance between the vectors of
  centroid norms of two successive iterates is ~0.

===============================================================
"""

import logging
from dataclasses import dataclass

import numpy as np

from clusteranalysis.config import (DEFAULT_TOL, KMeansConfig,
                                    check_random_state, resolve_init)
from clusteranalysis.distance import (centroid_norms, euclidean,
                                      pairwise_distances)
from clusteranalysis.objective import total_within_ss
from clusteranalysis.tables import as_matrix

logger = logging.getLogger(__name__)


def _frozen(array):
    array = np.array(array)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class KmeansResult:
    """
    Outcome of one K-means run (or the best of several).

    K : number of clusters
    centroids : array (K, n_features)
    cluster : array (n_samples,) of cluster ids in [0, K)
    withinss : total within-cluster sum of squares
    iter : iterations used by the run
    """

    K: int
    centroids: np.ndarray
    cluster: np.ndarray
    withinss: float
    iter: int

    def __post_init__(self):
        object.__setattr__(self, 'centroids', _frozen(self.centroids))
        object.__setattr__(self, 'cluster', _frozen(self.cluster))
        object.__setattr__(self, 'withinss', float(self.withinss))

    def __str__(self):
        lines = [f"KmeansResult{{{self.centroids.dtype}}}:",
                 f" K = {self.K}",
                 " centroids = ["]
        for centroid in self.centroids:
            lines.append(f"     {centroid.tolist()}")
        lines.append(" ]")
        lines.append(f" cluster = {_abbreviate(self.cluster)}")
        lines.append(f" within-cluster sum of squares = {self.withinss}")
        lines.append(f" iterations = {self.iter}")
        return "\n".join(lines)


def _abbreviate(values, edge=10):
    values = [int(v) for v in values]
    if len(values) <= 2 * edge:
        return str(values)
    head = ", ".join(str(v) for v in values[:edge])
    tail = ", ".join(str(v) for v in values[-edge:])
    return f"[{head}  …  {tail}]"


# ============================================================
# INITIALIZATION
# ============================================================

def init_random(X, K, random_state=None):
    """K rows drawn uniformly WITH replacement; duplicates are allowed."""
    rng = check_random_state(random_state)
    indices = rng.randint(X.shape[0], size=K)
    return X[indices].copy()


def init_kmeans_plus_plus(X, K, random_state=None):
    """
    Farthest-point K-means++ seeding.

    Keeps, for every observation, the distance to its nearest chosen
    centroid, and picks the observation where that distance is largest.
    """
    rng = check_random_state(random_state)
    n_samples, n_features = X.shape
    centroids = np.empty((K, n_features))

    centroids[0] = X[rng.randint(n_samples)]
    nearest = np.full(n_samples, np.inf)

    for k in range(1, K):
        # Only the newest centroid can lower the nearest distance
        nearest = np.minimum(nearest, pairwise_distances(X, centroids[k-1:k])[:, 0])
        centroids[k] = X[np.argmax(nearest)]

    return centroids


_INITIALIZERS = {
    'random': init_random,
    'kmeans++': init_kmeans_plus_plus,
}


def initialize_centroids(X, K, init='kmeans++', random_state=None):
    """
    Starting centroids for one run.

    init : 'kmeans++' (or 'kmpp') or 'random'; anything else raises
    InvalidArgument.
    """
    return _INITIALIZERS[resolve_init(init)](X, K, random_state)


# ============================================================
# ASSIGN / UPDATE / CONVERGE
# ============================================================

def assign_clusters(X, centroids):
    """Index of the nearest centroid for every row (lowest index on ties)."""
    return np.argmin(pairwise_distances(X, centroids), axis=1)


def update_centroids(X, cluster, centroids):
    """
    New centroid set: the mean of each cluster's observations.

    Returns a fresh array. A cluster with no observations keeps its
    centroid from `centroids`.
    """
    new_centroids = np.array(centroids, dtype=float)

    for k in range(new_centroids.shape[0]):
        mask = cluster == k
        if np.any(mask):
            new_centroids[k] = X[mask].mean(axis=0)

    return new_centroids


def has_converged(old_norms, new_norms, tol=DEFAULT_TOL):
    """True when the vector of centroid norms did not move (within `tol`)."""
    return euclidean(old_norms, new_norms) <= tol


# ============================================================
# DRIVERS
# ============================================================

def single_run(X, K, maxiter=10, init='kmeans++', random_state=None,
               tol=DEFAULT_TOL):
    """
    One K-means run from one initialization.

    The initial assignment counts as iteration 1; up to `maxiter - 1`
    update/assign passes follow. Arguments are assumed validated (see
    `kmeans`).
    """
    rng = check_random_state(random_state)

    # Initialize, then first assignment
    centroids = initialize_centroids(X, K, init, rng)
    cluster = assign_clusters(X, centroids)
    withinss = total_within_ss(X, K, cluster)
    n_iter = 1
    norms = centroid_norms(centroids)

    best_centroids, best_cluster, best_withinss = centroids, cluster, withinss

    for _ in range(1, maxiter):
        centroids = update_centroids(X, cluster, centroids)
        cluster = assign_clusters(X, centroids)
        withinss = total_within_ss(X, K, cluster)
        new_norms = centroid_norms(centroids)
        n_iter += 1

        if withinss <= best_withinss:
            best_centroids, best_cluster, best_withinss = centroids, cluster, withinss

        logger.debug("iter %d: withinss=%.6g", n_iter, withinss)
        if has_converged(norms, new_norms, tol):
            logger.debug("converged after %d iterations", n_iter)
            break
        norms = new_norms

    return KmeansResult(K=K, centroids=best_centroids, cluster=best_cluster,
                        withinss=best_withinss, iter=n_iter)


def kmeans(data, K, nstart=1, maxiter=10, init='kmeans++', random_state=None,
           tol=DEFAULT_TOL):
    """
    Cluster `data` into K groups, keeping the best of `nstart` restarts.

    Parameters:
    -----------
    data : table-like (n_samples, n_features)
        Anything `as_matrix` accepts. It is never modified.
    K : int
        Number of clusters, 1 <= K <= n_samples
    nstart : int
        Number of independent restarts
    maxiter : int
        Iteration budget per restart
    init : str
        'kmeans++' (default, alias 'kmpp') or 'random'
    random_state : None, int or np.random.RandomState
        Seed for the initializations. A fixed seed gives identical results.
    tol : float
        Convergence tolerance on the shift of centroid norms

    Returns:
    --------
    KmeansResult of the restart with the lowest within-cluster sum of squares.

    Raises:
    -------
    InvalidArgument
        Bad K, nstart, maxiter, tol, init, or a non-numeric / empty table.
    """
    X = as_matrix(data)
    config = KMeansConfig(n_clusters=K, nstart=nstart, maxiter=maxiter,
                          init=init, tol=tol, random_state=random_state)
    config.validate(X.shape[0])
    rng = check_random_state(config.random_state)

    best = None
    for start in range(config.nstart):
        result = single_run(X, config.n_clusters, config.maxiter,
                            config.init_method, rng, config.tol)
        logger.debug("start %d/%d: withinss=%.6g after %d iterations",
                     start + 1, config.nstart, result.withinss, result.iter)
        if best is None or result.withinss < best.withinss:
            best = result

    logger.info("kmeans K=%d: best withinss=%.6g over %d start(s)",
                best.K, best.withinss, config.nstart)
    return best


cluster = kmeans


# ============================================================
# ESTIMATOR INTERFACE
# ============================================================

class KMeans:
    """
    K-Means Clustering — fit/predict wrapper around `kmeans`.

    Paradigm: CENTROID PARTITIONING
    - Hard assignment: each point belongs to exactly one cluster
    - Euclidean distance
    - Best of `n_init` restarts
    """

    def __init__(self, n_clusters=3, init='kmeans++', max_iter=10,
                 n_init=1, tol=DEFAULT_TOL, random_state=None):
        """
        Parameters:
        -----------
        n_clusters : int
            Number of clusters K
        init : str
            'random': random rows (with replacement)
            'kmeans++': farthest-point seeding
        max_iter : int
            Maximum iterations per run
        n_init : int
            Number of runs with different initializations
        tol : float
            Convergence tolerance (shift of the centroid norms)
        random_state : int or None
            Random seed for reproducibility
        """
        self.n_clusters = n_clusters
        self.init = init
        self.max_iter = max_iter
        self.n_init = n_init
        self.tol = tol
        self.random_state = random_state

        # Attributes set after fit
        self.result_ = None
        self.cluster_centers_ = None  # Centroids (K × d)
        self.labels_ = None           # Cluster assignments (n_samples,)
        self.inertia_ = None          # Within-cluster sum of squares
        self.n_iter_ = None           # Iterations of the winning run

    def fit(self, X):
        """Run K-means on X and store the best restart."""
        self.result_ = kmeans(X, self.n_clusters, nstart=self.n_init,
                              maxiter=self.max_iter, init=self.init,
                              random_state=self.random_state, tol=self.tol)
        self.cluster_centers_ = self.result_.centroids
        self.labels_ = self.result_.cluster
        self.inertia_ = self.result_.withinss
        self.n_iter_ = self.result_.iter
        return self

    def _check_fitted(self):
        if self.result_ is None:
            raise RuntimeError("KMeans instance is not fitted yet; call fit() first")

    def predict(self, X):
        """Assign new points to the nearest fitted centroid."""
        self._check_fitted()
        return assign_clusters(as_matrix(X), self.cluster_centers_)

    def fit_predict(self, X):
        """Fit and return cluster labels."""
        return self.fit(X).labels_

    def transform(self, X):
        """Transform X to cluster-distance space, shape (n_samples, K)."""
        self._check_fitted()
        return pairwise_distances(as_matrix(X), self.cluster_centers_)
