"""
SYNTHETIC DATASETS — known structure to cluster against.

Each generator returns (X, y): the observations and the true cluster of
each one. K-means never sees y; it is there to score the result.

    make_clustered          Gaussian blobs — K-means' home turf
    make_separated_points   zero-variance clusters far apart (sanity check)
    make_circles            concentric rings — non-convex, K-means fails
    make_moons              interleaved half-moons — non-convex, K-means fails
"""

import numpy as np

from clusteranalysis.config import check_random_state


def make_clustered(n_samples=500, n_clusters=5, n_features=2, random_state=42):
    """
    WHAT: Gaussian blobs with random centers and random spreads.
    TESTS: Structure discovery when clusters really are spherical.

    n_samples is split evenly; the remainder is dropped.
    """
    rng = check_random_state(random_state)

    n_per_cluster = n_samples // n_clusters
    X = []
    y = []

    for i in range(n_clusters):
        # Random cluster center
        center = rng.randn(n_features) * 5
        # Random cluster spread
        spread = rng.rand() * 0.5 + 0.3

        cluster_points = rng.randn(n_per_cluster, n_features) * spread + center
        X.append(cluster_points)
        y.extend([i] * n_per_cluster)

    X = np.vstack(X)
    y = np.array(y)

    return _shuffled(X, y, rng)


def make_separated_points(n_clusters=2, n_per_cluster=5, n_features=2,
                          spacing=100.0):
    """
    WHAT: n_clusters groups, each a single point repeated n_per_cluster times.
    TESTS: The best possible objective is exactly 0 and one update suffices.

    Centers sit on the diagonal, `spacing` apart. Deterministic.
    """
    centers = np.arange(n_clusters, dtype=float)[:, np.newaxis] * spacing
    centers = np.repeat(centers, n_features, axis=1)

    X = np.repeat(centers, n_per_cluster, axis=0)
    y = np.repeat(np.arange(n_clusters), n_per_cluster)
    return X, y


def _shuffled(X, y, rng):
    order = rng.permutation(len(y))
    return X[order], y[order]


def make_circles(n_samples=500, radii=(1.0, 3.0), noise=0.05, random_state=42):
    """
    WHAT: Concentric rings, one cluster per radius (innermost is cluster 0).
    TESTS: Non-convex clusters; K-means slices the rings into wedges.

    Angles are uniform, radii get Gaussian jitter of scale `noise`.
    """
    rng = check_random_state(random_state)
    n_per_ring = n_samples // len(radii)

    y = np.repeat(np.arange(len(radii)), n_per_ring)
    angle = rng.uniform(0.0, 2 * np.pi, size=len(y))
    radius = np.asarray(radii, dtype=float)[y] + noise * rng.randn(len(y))

    X = radius[:, np.newaxis] * np.column_stack([np.cos(angle), np.sin(angle)])
    return _shuffled(X, y, rng)


def make_moons(n_samples=500, noise=0.15, offset=(1.0, 0.5), random_state=42):
    """
    WHAT: Two interlocking half-circles of radius 1.
    TESTS: Curved clusters; K-means cuts them with a straight boundary.

    Moon 1 is the upper arc around the origin. Moon 2 is the lower arc,
    moved by `offset`.
    """
    rng = check_random_state(random_state)
    n = n_samples // 2

    t = np.linspace(0.0, np.pi, n)
    upper = np.column_stack([np.cos(t), np.sin(t)])
    lower = np.column_stack([-np.cos(t), -np.sin(t)]) + np.asarray(offset, dtype=float)

    X = np.vstack([upper, lower]) + noise * rng.randn(2 * n, 2)
    y = np.repeat([0, 1], n)
    return _shuffled(X, y, rng)
