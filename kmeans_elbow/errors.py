"""Exceptions raised at the boundary of the clustering core."""


class KMeansElbowError(Exception):
    """Base class for errors raised by this package."""


class ShapeMismatchError(KMeansElbowError, ValueError):
    """Points, centroids or labels with incompatible shapes."""


class InvalidKError(KMeansElbowError, ValueError):
    """Cluster count outside [1, number of points]."""


class EmptyDatasetError(KMeansElbowError, ValueError):
    """Clustering requested on a dataset with zero points."""
