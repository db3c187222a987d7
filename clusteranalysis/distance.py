"""
EUCLIDEAN DISTANCE — the only metric K-means needs.

    d(a, b) = √Σ(aᵢ - bᵢ)²

`euclidean` compares two vectors. `pairwise_distances` does the same for
every (observation, centroid) pair at once, which is what the assignment
step and the K-means++ seeding actually call.
"""

import numpy as np

from clusteranalysis.errors import DimensionMismatch


def euclidean(a, b):
    """
    Euclidean distance between two vectors of equal length.

    NaN and Inf are propagated, not checked.

    Raises:
    -------
    DimensionMismatch
        If `a` or `b` is not 1-D, or their lengths differ.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.ndim != 1 or b.ndim != 1:
        raise DimensionMismatch(
            f"Expected two 1-D vectors, got shapes {a.shape} and {b.shape}"
        )
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatch(
            f"Vectors have different lengths: {a.shape[0]} and {b.shape[0]}"
        )
    return float(np.sqrt(np.sum((a - b)**2)))


def pairwise_distances(X, centroids):
    """
    Distance from every row of X to every centroid.

    Parameters:
    -----------
    X : array (n_samples, n_features)
    centroids : array (K, n_features)

    Returns:
    --------
    distances : array (n_samples, K)
    """
    X = np.asarray(X, dtype=float)
    centroids = np.asarray(centroids, dtype=float)
    if X.shape[1] != centroids.shape[1]:
        raise DimensionMismatch(
            f"Observations have {X.shape[1]} features but centroids have "
            f"{centroids.shape[1]}"
        )
    # One centroid at a time keeps memory at O(n·d). Direct differences
    # rather than ||x||² + ||c||² - 2x·c: the expanded form loses exact
    # zeros, and ties must resolve to the lowest index.
    distances = np.empty((X.shape[0], centroids.shape[0]))
    for k in range(centroids.shape[0]):
        distances[:, k] = np.sqrt(np.sum((X - centroids[k])**2, axis=1))
    return distances


def centroid_norms(centroids):
    """Euclidean norm of each centroid, shape (K,)."""
    return np.sqrt(np.sum(np.asarray(centroids, dtype=float)**2, axis=1))
