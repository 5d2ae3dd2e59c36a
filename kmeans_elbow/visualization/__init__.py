"""Visualization utilities for clusters and elbow charts."""

from .plots import (
    CLUSTER_COLORS,
    CENTROID_COLORS,
    plot_clusters,
    plot_elbow,
    ElbowExplorer,
    launch_explorer
)

__all__ = [
    'CLUSTER_COLORS',
    'CENTROID_COLORS',
    'plot_clusters',
    'plot_elbow',
    'ElbowExplorer',
    'launch_explorer'
]
