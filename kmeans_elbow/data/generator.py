"""
Random dataset generation.

The dataset for a run is drawn once and returned read-only so every
clustering invocation of that run shares the same points.
"""

import numpy as np
from typing import Optional, Union

from ..clustering import random_points
from ..clustering.kmeans import DEFAULT_LOW, DEFAULT_HIGH


def generate_dataset(
    n_points: int = 120,
    dim: int = 2,
    random_seed: Union[int, np.random.SeedSequence, None] = None,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
    verbose: bool = True
) -> np.ndarray:
    """
    Generate uniformly distributed points.
    
    Args:
        n_points: Number of points
        dim: Dimensionality of every point
        random_seed: Seed for reproducibility (None = fresh entropy)
        low: Lower bound of every coordinate
        high: Upper bound of every coordinate
        verbose: Whether to print statistics
        
    Returns:
        Read-only array of shape (n_points, dim)
    """
    rng = np.random.default_rng(random_seed)
    points = random_points(n_points, dim, rng, low, high)
    points.setflags(write=False)
    
    if verbose:
        print(f"✓ Generated {n_points} points in {dim}D, coordinates in [{low}, {high})")
    
    return points
