"""K-means clustering with K-means++ seeding and multi-start selection."""

from clusteranalysis.config import KMeansConfig
from clusteranalysis.distance import euclidean, pairwise_distances
from clusteranalysis.errors import (ClusterAnalysisError, DimensionMismatch,
                                    InvalidArgument)
from clusteranalysis.kmeans import KMeans, KmeansResult, cluster, kmeans
from clusteranalysis.objective import squared_error, total_within_ss
from clusteranalysis.tables import as_matrix

__version__ = '0.1.0'

__all__ = [
    'ClusterAnalysisError',
    'DimensionMismatch',
    'InvalidArgument',
    'KMeans',
    'KMeansConfig',
    'KmeansResult',
    'as_matrix',
    'cluster',
    'euclidean',
    'kmeans',
    'pairwise_distances',
    'squared_error',
    'total_within_ss',
]
