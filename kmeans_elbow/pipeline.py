"""
Single entry point that regenerates a dataset and evaluates a k range.

``compute`` is idempotent for a fixed seed: it owns no state between
calls and returns everything a renderer needs in an ``ElbowResults``.
"""

import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from .clustering import ClusteringResult, evaluate_range
from .clustering.kmeans import DEFAULT_LOW, DEFAULT_HIGH
from .data import generate_dataset
from .evaluation import summarize_elbow


@dataclass(frozen=True, eq=False)
class ClusteringView:
    """Data handed to the renderer for one k."""
    points: np.ndarray
    labels: np.ndarray
    centroids: np.ndarray
    k: int


@dataclass(frozen=True, eq=False)
class ElbowResults:
    """Dataset plus one (result, inertia) pair per evaluated k."""
    points: np.ndarray
    evaluated: List[Tuple[ClusteringResult, float]]
    k_min: int

    @property
    def k_values(self) -> List[int]:
        return [result.k for result, _ in self.evaluated]

    @property
    def inertias(self) -> List[float]:
        return [value for _, value in self.evaluated]

    def elbow_view(self) -> List[Tuple[int, float]]:
        """Ordered (k, inertia) pairs for the elbow chart."""
        return list(zip(self.k_values, self.inertias))

    def clustering_view(self, k_index: int) -> ClusteringView:
        """
        Clustering of the k at position ``k_index`` of the elbow view.

        Args:
            k_index: Index into the evaluated range (k - k_min)

        Returns:
            ClusteringView for that k
        """
        if not 0 <= k_index < len(self.evaluated):
            raise IndexError(
                f"k_index must lie in [0, {len(self.evaluated)}), got {k_index}"
            )
        result, _ = self.evaluated[k_index]
        return ClusteringView(
            points=self.points,
            labels=result.labels,
            centroids=result.centroids,
            k=result.k
        )

    def view_for_k(self, k: int) -> ClusteringView:
        """Clustering view looked up by the number of clusters."""
        return self.clustering_view(k - self.k_min)

    def summary(self) -> pd.DataFrame:
        """Per-k summary table of the evaluated range."""
        return summarize_elbow(self.evaluated)


def compute(
    n_points: int = 120,
    dim: int = 2,
    k_min: int = 1,
    k_max: int = 10,
    random_seed: Union[int, np.random.SeedSequence, None] = None,
    max_iterations: int = 100,
    tolerance: float = 0.0,
    n_jobs: int = 1,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
    cancel_event: Optional[threading.Event] = None,
    deadline: Optional[float] = None,
    verbose: bool = False
) -> ElbowResults:
    """
    Generate a fresh dataset and cluster it for every k in [k_min, k_max].

    The dataset and the per-k runs draw from independent streams
    derived from ``random_seed``.

    Args:
        n_points: Number of points to generate
        dim: Dimensionality of the points
        k_min: Smallest number of clusters
        k_max: Largest number of clusters
        random_seed: Seed for the whole computation (None = fresh entropy)
        max_iterations: Iteration cap per run
        tolerance: Convergence tolerance (0 = exact equality)
        n_jobs: Worker threads for the k range
        low: Lower bound of every coordinate
        high: Upper bound of every coordinate
        cancel_event: Event checked between iterations
        deadline: ``time.monotonic()`` instant checked between iterations
        verbose: Whether to print progress

    Returns:
        ElbowResults
    """
    if not isinstance(random_seed, np.random.SeedSequence):
        random_seed = np.random.SeedSequence(random_seed)
    data_seed, range_seed = random_seed.spawn(2)

    points = generate_dataset(
        n_points, dim,
        random_seed=data_seed,
        low=low,
        high=high,
        verbose=verbose
    )

    evaluated = evaluate_range(
        points, k_min, k_max,
        max_iterations=max_iterations,
        tolerance=tolerance,
        random_seed=range_seed,
        n_jobs=n_jobs,
        cancel_event=cancel_event,
        deadline=deadline,
        low=low,
        high=high,
        verbose=verbose
    )

    return ElbowResults(points=points, evaluated=evaluated, k_min=k_min)


def make_regenerator(
    random_seed: Optional[int] = None,
    **compute_kwargs
) -> Callable[[], ElbowResults]:
    """
    Build a callable that runs ``compute`` on a fresh dataset per call.

    Every call spawns the next child of ``SeedSequence(random_seed)``,
    so a fixed seed gives a reproducible sequence of different datasets.

    Args:
        random_seed: Seed for the sequence of computations
        **compute_kwargs: Remaining keyword arguments for ``compute``

    Returns:
        Zero-argument callable returning ElbowResults
    """
    seed_sequence = np.random.SeedSequence(random_seed)

    def _regenerate() -> ElbowResults:
        child, = seed_sequence.spawn(1)
        return compute(random_seed=child, **compute_kwargs)

    return _regenerate
