"""K-means clustering engine and elbow batch driver."""

from .kmeans import (
    RunStatus,
    ClusteringResult,
    random_points,
    assign,
    update,
    run,
    inertia,
    evaluate_range
)

__all__ = [
    'RunStatus',
    'ClusteringResult',
    'random_points',
    'assign',
    'update',
    'run',
    'inertia',
    'evaluate_range'
]
