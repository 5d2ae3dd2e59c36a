"""
Visualization functions for k-means elbow analysis.

This module provides plotting utilities for:
- Per-k cluster scatter plots with point-to-centroid lines
- Elbow charts of inertia versus k
- An interactive explorer linking both views
"""

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.collections import LineCollection
from matplotlib.lines import Line2D
from matplotlib.widgets import Button
from typing import Callable, List, Optional, Tuple

from ..pipeline import ClusteringView, ElbowResults


CLUSTER_COLORS = [
    '#1f77b4', '#ff7f0e', '#2ca02c', '#d62728', '#9467bd',
    '#8c564b', '#e377c2', '#7f7f7f', '#bcbd22', '#17becf'
]

CENTROID_COLORS = [
    '#FFD700', '#00FFFF', '#FF69B4', '#00FF00', '#FFA500',
    '#FF00FF', '#00BFFF', '#FF6347', '#ADFF2F', '#FF4500'
]

ELBOW_COLOR = '#d62728'

# Set plotting style
plt.style.use('seaborn-v0_8-darkgrid')
sns.set_palette(CLUSTER_COLORS)


def _xy(points: np.ndarray) -> np.ndarray:
    """First two coordinates of every point (1-D data is drawn on y=0)."""
    points = np.asarray(points, dtype=float)
    if points.shape[1] >= 2:
        return points[:, :2]
    return np.column_stack([points[:, 0], np.zeros(len(points))])


def _draw_clusters(ax: plt.Axes, view: ClusteringView):
    ax.clear()
    points_xy = _xy(view.points)
    centroids_xy = _xy(view.centroids)

    for c in range(view.k):
        color = CLUSTER_COLORS[c % len(CLUSTER_COLORS)]
        cluster_xy = points_xy[view.labels == c]
        centroid = centroids_xy[c]

        if len(cluster_xy):
            segments = [[p, centroid] for p in cluster_xy]
            ax.add_collection(LineCollection(segments, colors=color, linewidths=1, alpha=0.5))

        ax.scatter(cluster_xy[:, 0], cluster_xy[:, 1], color=color, s=40,
                   label=f'Cluster {c + 1}', zorder=2)
        ax.scatter([centroid[0]], [centroid[1]],
                   color=CENTROID_COLORS[c % len(CENTROID_COLORS)],
                   s=500, edgecolors='#222', linewidths=3, zorder=3)
        ax.scatter([centroid[0]], [centroid[1]], color='#222', s=20, zorder=4)

    ax.autoscale_view()
    ax.set_xlabel('X', fontsize=11)
    ax.set_ylabel('Y', fontsize=11)
    ax.set_title(f'Clusters (k={view.k})', fontsize=14, fontweight='bold')
    ax.legend(loc='upper center', bbox_to_anchor=(0.5, -0.1), ncol=5, fontsize=9)
    ax.grid(True, alpha=0.3)


def _draw_elbow(
    ax: plt.Axes,
    elbow: List[Tuple[int, float]],
    selected_k: Optional[int] = None
) -> Line2D:
    ax.clear()
    k_values = [k for k, _ in elbow]
    inertias = [value for _, value in elbow]

    line, = ax.plot(k_values, inertias, 'o-', color=ELBOW_COLOR, linewidth=2,
                    markersize=10, picker=True, pickradius=8)

    if selected_k is not None and selected_k in k_values:
        idx = k_values.index(selected_k)
        ax.scatter([selected_k], [inertias[idx]], s=400, facecolors='none',
                   edgecolors='#222', linewidths=2, zorder=3,
                   label=f'Selected k={selected_k}')
        ax.legend()

    ax.set_xticks(k_values)
    ax.set_xlabel('Number of Centroids (k)', fontsize=12)
    ax.set_ylabel('Inertia', fontsize=12)
    ax.set_title('Elbow Chart', fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)
    return line


def plot_clusters(
    view: ClusteringView,
    save_path: Optional[str] = None,
    dpi: int = 150,
    show: bool = True
) -> plt.Figure:
    """
    Plot the clustering of one k.

    Every point is drawn in its cluster color with a line to its
    centroid; centroids are drawn as large ringed markers.

    Args:
        view: Clustering view for the selected k
        save_path: Optional path to save figure
        dpi: Resolution of the saved figure
        show: Whether to display the figure

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(9, 8))
    _draw_clusters(ax, view)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=dpi, bbox_inches='tight')
        print(f"✓ Saved {save_path}")

    if show:
        plt.show()

    return fig


def plot_elbow(
    elbow: List[Tuple[int, float]],
    selected_k: Optional[int] = None,
    save_path: Optional[str] = None,
    dpi: int = 150,
    show: bool = True
) -> plt.Figure:
    """
    Plot inertia versus number of clusters.

    Args:
        elbow: Ordered (k, inertia) pairs
        selected_k: Optional k to highlight
        save_path: Optional path to save figure
        dpi: Resolution of the saved figure
        show: Whether to display the figure

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(10, 5))
    _draw_elbow(ax, elbow, selected_k)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=dpi, bbox_inches='tight')
        print(f"✓ Saved {save_path}")

    if show:
        plt.show()

    return fig


class ElbowExplorer:
    """
    Interactive window with the cluster view and the elbow chart.

    Clicking a marker on the elbow chart shows the clustering for that
    k; the "Regenerate" button calls ``compute_fn`` again and redraws.
    """

    def __init__(
        self,
        compute_fn: Callable[[], ElbowResults],
        initial_index: int = 1
    ):
        self.compute_fn = compute_fn
        self.initial_index = initial_index
        self.results: Optional[ElbowResults] = None
        self.selected_index: Optional[int] = None

        self.fig, (self.ax_clusters, self.ax_elbow) = plt.subplots(1, 2, figsize=(16, 7))
        self.fig.subplots_adjust(bottom=0.25, wspace=0.25)
        button_ax = self.fig.add_axes([0.42, 0.02, 0.16, 0.06])
        self.button = Button(button_ax, 'Regenerate')
        self.button.on_clicked(self.regenerate)
        self._elbow_line = None
        self.fig.canvas.mpl_connect('pick_event', self._on_pick)

    @property
    def selected_k(self) -> Optional[int]:
        if self.results is None or self.selected_index is None:
            return None
        return self.results.k_values[self.selected_index]

    def regenerate(self, event=None):
        self.results = self.compute_fn()
        n_k = len(self.results.evaluated)
        self.select_index(min(max(self.initial_index, 0), n_k - 1))

    def select_index(self, k_index: int):
        view = self.results.clustering_view(k_index)
        self.selected_index = k_index
        _draw_clusters(self.ax_clusters, view)
        self._elbow_line = _draw_elbow(self.ax_elbow, self.results.elbow_view(), view.k)
        self.fig.canvas.draw_idle()

    def _on_pick(self, event):
        if event.artist is not self._elbow_line or not len(event.ind):
            return
        self.select_index(int(event.ind[0]))


def launch_explorer(
    compute_fn: Callable[[], ElbowResults],
    initial_index: int = 1,
    show: bool = True
) -> ElbowExplorer:
    """
    Open the interactive elbow explorer.

    Args:
        compute_fn: Callable producing a fresh ElbowResults
        initial_index: Index of the k shown first (1 = second k)
        show: Whether to block on the window

    Returns:
        The ElbowExplorer driving the window
    """
    explorer = ElbowExplorer(compute_fn, initial_index=initial_index)
    explorer.regenerate()

    if show:
        plt.show()

    return explorer
