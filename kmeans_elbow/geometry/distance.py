"""
Euclidean distance between points.

Both helpers reject inputs whose dimensionality differs instead of
broadcasting them silently.
"""

import numpy as np

from ..errors import ShapeMismatchError


def distance(a, b) -> float:
    """
    Euclidean distance between two points.
    
    Args:
        a: First point, sequence of D coordinates
        b: Second point, sequence of D coordinates
        
    Returns:
        sqrt(sum((a_i - b_i)^2))
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    
    if a.shape != b.shape:
        raise ShapeMismatchError(
            f"Cannot compute distance between shapes {a.shape} and {b.shape}"
        )
    
    return float(np.sqrt(np.sum((a - b) ** 2)))


def pairwise_distances(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Distances from every point to every centroid.
    
    Args:
        points: Array of shape (n_points, dim)
        centroids: Array of shape (k, dim)
        
    Returns:
        Array of shape (n_points, k)
    """
    points = np.asarray(points, dtype=float)
    centroids = np.asarray(centroids, dtype=float)
    
    if points.ndim != 2 or centroids.ndim != 2 or points.shape[1] != centroids.shape[1]:
        raise ShapeMismatchError(
            f"Points {points.shape} and centroids {centroids.shape} "
            f"must be 2-D with the same number of columns"
        )
    
    # (n_points, 1, dim) - (1, k, dim) -> (n_points, k)
    diff = points[:, np.newaxis, :] - centroids[np.newaxis, :, :]
    return np.sqrt(np.sum(diff ** 2, axis=2))
