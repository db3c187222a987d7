"""
Judging a clustering: accuracy against known labels, silhouette, and the
elbow curve for choosing K.
"""

from itertools import permutations

import numpy as np

from clusteranalysis.kmeans import kmeans
from clusteranalysis.tables import as_matrix


def clustering_accuracy(y_true, y_pred, n_clusters):
    """
    Compute clustering accuracy with optimal label permutation.

    Clusters have arbitrary labels, so we find the permutation
    that maximizes accuracy.
    """
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)

    best_acc = 0.0
    for perm in permutations(range(n_clusters)):
        y_mapped = np.array([perm[y] if y < len(perm) else -1 for y in y_pred])
        acc = np.mean(y_mapped == y_true)
        best_acc = max(best_acc, acc)
    return float(best_acc)


def silhouette_score(X, labels):
    """
    Compute silhouette score — how well-separated are clusters?

    For each point:
        a = mean distance to points in same cluster
        b = mean distance to points in nearest other cluster
        s = (b - a) / max(a, b)

    Score in [-1, 1]: higher = better separated. A single cluster scores 0.
    """
    X = as_matrix(X)
    labels = np.asarray(labels)
    unique_labels = np.unique(labels)

    if len(unique_labels) == 1:
        return 0.0  # Can't compute silhouette with 1 cluster

    silhouettes = np.zeros(X.shape[0])

    for i in range(X.shape[0]):
        # One row of the distance matrix at a time
        dists = np.sqrt(np.sum((X - X[i])**2, axis=1))

        same_cluster = labels == labels[i]
        same_cluster[i] = False  # Exclude self
        a = dists[same_cluster].mean() if np.any(same_cluster) else 0.0

        b = min(dists[labels == k].mean() for k in unique_labels if k != labels[i])

        denom = max(a, b)
        silhouettes[i] = (b - a) / denom if denom > 0 else 0.0

    return float(np.mean(silhouettes))


def elbow_analysis(X, k_range=range(1, 11), **kmeans_kwargs):
    """
    Elbow method for choosing K.

    Returns the K values and the within-cluster sum of squares for each.
    K values larger than the number of observations are skipped.
    Extra keyword arguments go to `kmeans`.
    """
    X = as_matrix(X)
    kmeans_kwargs.setdefault('random_state', 42)

    ks = [k for k in k_range if k <= X.shape[0]]
    inertias = [kmeans(X, k, **kmeans_kwargs).withinss for k in ks]
    return ks, inertias
