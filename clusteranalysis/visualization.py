"""
Plots for K-means results: the clustering itself and the elbow curve.

Only the first two features are drawn.
"""

import matplotlib.pyplot as plt
import numpy as np

from clusteranalysis.metrics import elbow_analysis
from clusteranalysis.tables import as_matrix


def plot_clusters(X, result, ax=None, title=None, alpha=0.6, s=20):
    """
    Scatter the observations colored by cluster, centroids marked with X.

    result : KmeansResult (or a fitted KMeans, via its `result_`)
    """
    X = as_matrix(X)
    result = getattr(result, 'result_', result)
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(5, 5))

    ax.scatter(X[:, 0], X[:, 1] if X.shape[1] > 1 else np.zeros(len(X)),
               c=result.cluster, cmap='viridis', alpha=alpha, s=s)

    centroids = result.centroids
    ax.scatter(centroids[:, 0],
               centroids[:, 1] if centroids.shape[1] > 1 else np.zeros(len(centroids)),
               c='red', marker='X', s=200, edgecolors='black', linewidth=2)

    if title is None:
        title = f'K={result.K}, withinss={result.withinss:.1f}'
    ax.set_title(title)
    return ax


def plot_elbow(X, k_range=range(1, 11), ax=None, true_k=None, **kmeans_kwargs):
    """Plot within-cluster sum of squares against K. Returns the axes."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(5, 4))

    ks, inertias = elbow_analysis(X, k_range, **kmeans_kwargs)
    ax.plot(ks, inertias, 'bo-', linewidth=2, markersize=8)
    if true_k is not None:
        ax.axvline(x=true_k, color='r', linestyle='--', label=f'True K={true_k}')
        ax.legend()
    ax.set_xlabel('Number of Clusters (K)')
    ax.set_ylabel('Within-cluster SS')
    ax.set_title('Elbow Method')
    ax.grid(True, alpha=0.3)
    return ax
