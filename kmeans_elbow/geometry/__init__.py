"""Distance utilities over fixed-dimension points."""

from .distance import distance, pairwise_distances

__all__ = [
    'distance',
    'pairwise_distances'
]
