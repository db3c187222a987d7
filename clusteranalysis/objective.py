"""
THE K-MEANS OBJECTIVE — total within-cluster sum of squares.

    W = Σₖ Σ_{x∈Cₖ} ||x - μₖ||²

Computed per feature column: for each cluster, take its rows, and for each
column add up the squared deviations from that column's mean. Lower is
better. An empty cluster adds nothing.
"""

import numpy as np


def squared_error(values):
    """
    Sum of squared deviations from the mean.

    A 1-D input is treated as one feature column. A 2-D input is summed
    over its columns. Columns with fewer than two values give 0.
    """
    values = np.asarray(values, dtype=float)
    if values.shape[0] <= 1:
        return 0.0
    return float(np.sum((values - values.mean(axis=0))**2))


def total_within_ss(X, K, cluster):
    """
    Total within-cluster sum of squares.

    Parameters:
    -----------
    X : array (n_samples, n_features)
    K : int
        Number of clusters; ids are 0..K-1.
    cluster : array (n_samples,)
        Cluster id of each observation.
    """
    X = np.asarray(X, dtype=float)
    cluster = np.asarray(cluster)

    error = 0.0
    for k in range(K):
        error += squared_error(X[cluster == k])
    return error
