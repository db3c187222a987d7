"""
Exceptions raised by the clustering engine.

Both concrete errors subclass ValueError, so callers that already guard
numeric code with `except ValueError` keep working.
"""


class ClusterAnalysisError(Exception):
    """Base class for every error raised by clusteranalysis."""


class DimensionMismatch(ClusterAnalysisError, ValueError):
    """Two vectors (or a matrix and a centroid set) disagree on length."""


class InvalidArgument(ClusterAnalysisError, ValueError):
    """An argument is out of range or not recognised.

    Raised before any computation starts, so no partial work is done.
    """
