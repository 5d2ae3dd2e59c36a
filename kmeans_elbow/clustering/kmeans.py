"""
K-means clustering (Lloyd's algorithm) for the elbow method.

This module provides the assign/update refinement loop, the inertia
score of a partition and a batch driver that clusters one dataset for
every k in a range. All randomness goes through explicit
``numpy.random.Generator`` handles so that runs are reproducible and
safe to execute in parallel.
"""

import time
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

import numpy as np

from ..errors import EmptyDatasetError, InvalidKError, ShapeMismatchError
from ..geometry import pairwise_distances


DEFAULT_LOW = 0.0
DEFAULT_HIGH = 10.0


class RunStatus(str, Enum):
    """Terminal state of a single clustering run."""
    CONVERGED = "converged"
    ITERATION_CAP_REACHED = "iteration_cap_reached"
    CANCELLED = "cancelled"


@dataclass(frozen=True, eq=False)
class ClusteringResult:
    """Labels and centroids produced by one run for a specific k."""
    labels: np.ndarray
    centroids: np.ndarray
    k: int
    n_iter: int
    status: RunStatus

    @property
    def converged(self) -> bool:
        return self.status == RunStatus.CONVERGED


def _as_points(points, name: str = "points") -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, 0)
    if arr.ndim != 2:
        raise ShapeMismatchError(
            f"{name} must be a 2-D array of shape (n, dim), got {arr.shape}"
        )
    return arr


def _ensure_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, copy=True)
    arr.setflags(write=False)
    return arr


def random_points(
    n: int,
    dim: int,
    rng: Optional[np.random.Generator] = None,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH
) -> np.ndarray:
    """
    Draw points uniformly from the box [low, high)^dim.

    Used for the dataset itself, for centroid initialization and for
    re-seeding empty clusters.

    Args:
        n: Number of points (>= 0)
        dim: Dimensionality (>= 1)
        rng: Random generator; a fresh unseeded one if omitted
        low: Lower bound of every coordinate (inclusive)
        high: Upper bound of every coordinate (exclusive)

    Returns:
        Array of shape (n, dim)
    """
    if n < 0:
        raise ValueError(f"Number of points must be >= 0, got {n}")
    if dim < 1:
        raise ValueError(f"Dimensionality must be >= 1, got {dim}")

    rng = _ensure_rng(rng)
    return rng.uniform(low, high, size=(n, dim))


def assign(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Label every point with the index of its nearest centroid.

    Ties are broken in favour of the lowest centroid index.

    Args:
        points: Array of shape (n_points, dim)
        centroids: Array of shape (k, dim), k >= 1

    Returns:
        Integer labels of shape (n_points,)
    """
    points = _as_points(points)
    centroids = _as_points(centroids, name="centroids")

    if len(centroids) < 1:
        raise InvalidKError("At least one centroid is required")

    distances = pairwise_distances(points, centroids)
    # argmin returns the first minimum
    return np.argmin(distances, axis=1)


def update(
    points: np.ndarray,
    labels: np.ndarray,
    k: int,
    rng: Optional[np.random.Generator] = None,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH
) -> np.ndarray:
    """
    Recompute centroids as the mean of their assigned points.

    A cluster with no assigned points is re-seeded at a fresh random
    point drawn the same way as ``random_points``, so the returned
    set always has exactly k rows.

    Args:
        points: Array of shape (n_points, dim)
        labels: Labels from ``assign`` for the same k
        k: Number of clusters
        rng: Random generator used for re-seeding empty clusters
        low: Lower bound for re-seeded coordinates
        high: Upper bound for re-seeded coordinates

    Returns:
        Array of shape (k, dim)
    """
    points = _as_points(points)
    labels = np.asarray(labels, dtype=int)

    if k < 1:
        raise InvalidKError(f"k must be >= 1, got {k}")
    if labels.shape != (len(points),):
        raise ShapeMismatchError(
            f"Expected {len(points)} labels, got shape {labels.shape}"
        )
    if labels.size and (labels.min() < 0 or labels.max() >= k):
        raise InvalidKError(f"Labels must lie in [0, {k})")

    dim = points.shape[1]
    centroids = np.empty((k, dim))

    for c in range(k):
        mask = labels == c
        if np.any(mask):
            centroids[c] = points[mask].mean(axis=0)
        else:
            if rng is None:
                rng = np.random.default_rng()
            centroids[c] = random_points(1, dim, rng, low, high)[0]

    return centroids


def _centroids_equal(new: np.ndarray, old: np.ndarray, tolerance: float) -> bool:
    if tolerance == 0:
        return np.array_equal(new, old)
    return bool(np.max(np.abs(new - old)) <= tolerance)


def _is_cancelled(
    cancel_event: Optional[threading.Event],
    deadline: Optional[float]
) -> bool:
    if cancel_event is not None and cancel_event.is_set():
        return True
    return deadline is not None and time.monotonic() >= deadline


def run(
    points: np.ndarray,
    k: int,
    max_iterations: int = 100,
    rng: Optional[np.random.Generator] = None,
    tolerance: float = 0.0,
    initial_centroids: Optional[np.ndarray] = None,
    cancel_event: Optional[threading.Event] = None,
    deadline: Optional[float] = None,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH
) -> ClusteringResult:
    """
    Cluster points into k groups with Lloyd's algorithm.

    The loop stops when an update leaves the centroids unchanged
    (bit-for-bit when ``tolerance`` is 0, otherwise within
    ``tolerance`` on every coordinate), after ``max_iterations``
    cycles, or when cancellation is requested. Hitting the iteration
    cap or being cancelled is not an error; the status of the
    returned result records which way the run ended.

    Args:
        points: Array of shape (n_points, dim)
        k: Number of clusters, 1 <= k <= n_points
        max_iterations: Maximum number of assign/update cycles
        rng: Random generator for initialization and re-seeding
        tolerance: Convergence tolerance (0 = exact equality)
        initial_centroids: Optional starting centroids of shape (k, dim)
        cancel_event: Event checked before every iteration
        deadline: ``time.monotonic()`` instant checked before every iteration
        low: Lower bound of the random initialization box
        high: Upper bound of the random initialization box

    Returns:
        ClusteringResult for k
    """
    points = _as_points(points)
    n_points = len(points)

    if k < 1 or k > n_points:
        raise InvalidKError(f"k must lie in [1, {n_points}], got {k}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")

    rng = _ensure_rng(rng)
    dim = points.shape[1]

    if initial_centroids is None:
        centroids = random_points(k, dim, rng, low, high)
    else:
        centroids = np.array(initial_centroids, dtype=float)
        if centroids.shape != (k, dim):
            raise ShapeMismatchError(
                f"initial_centroids must have shape {(k, dim)}, got {centroids.shape}"
            )

    labels = None
    n_iter = 0
    status = RunStatus.ITERATION_CAP_REACHED

    for iteration in range(max_iterations):
        if _is_cancelled(cancel_event, deadline):
            status = RunStatus.CANCELLED
            break

        labels = assign(points, centroids)
        new_centroids = update(points, labels, k, rng, low, high)
        n_iter = iteration + 1

        if _centroids_equal(new_centroids, centroids, tolerance):
            status = RunStatus.CONVERGED
            break

        centroids = new_centroids

    if labels is None:
        # Cancelled before the first cycle
        labels = assign(points, centroids)

    return ClusteringResult(
        labels=_frozen(labels),
        centroids=_frozen(centroids),
        k=k,
        n_iter=n_iter,
        status=status
    )


def inertia(points: np.ndarray, centroids: np.ndarray, labels: np.ndarray) -> float:
    """
    Within-cluster sum of squared distances.

    Args:
        points: Array of shape (n_points, dim)
        centroids: Array of shape (k, dim)
        labels: Labels of shape (n_points,) indexing into centroids

    Returns:
        Sum over points of the squared distance to the assigned centroid
    """
    points = _as_points(points)
    centroids = _as_points(centroids, name="centroids")
    labels = np.asarray(labels, dtype=int)

    if labels.shape != (len(points),):
        raise ShapeMismatchError(
            f"Expected {len(points)} labels, got shape {labels.shape}"
        )
    if len(points) == 0:
        return 0.0
    if centroids.shape[1] != points.shape[1]:
        raise ShapeMismatchError(
            f"Points {points.shape} and centroids {centroids.shape} differ in dimensionality"
        )
    if labels.min() < 0 or labels.max() >= len(centroids):
        raise InvalidKError(f"Labels must lie in [0, {len(centroids)})")

    assigned_centroids = centroids[labels]
    return float(np.sum((points - assigned_centroids) ** 2))


def _describe(result: ClusteringResult) -> str:
    if result.status == RunStatus.CONVERGED:
        return f"converged after {result.n_iter} iterations"
    if result.status == RunStatus.CANCELLED:
        return f"cancelled after {result.n_iter} iterations"
    return f"stopped at iteration cap ({result.n_iter})"


def evaluate_range(
    points: np.ndarray,
    k_min: int,
    k_max: int,
    max_iterations: int = 100,
    tolerance: float = 0.0,
    random_seed: Union[int, np.random.SeedSequence, None] = None,
    n_jobs: int = 1,
    cancel_event: Optional[threading.Event] = None,
    deadline: Optional[float] = None,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
    verbose: bool = False
) -> List[Tuple[ClusteringResult, float]]:
    """
    Run k-means and score it for every k in [k_min, k_max].

    Each k gets its own generator spawned from ``random_seed``, so
    the output for a given seed does not depend on ``n_jobs``.

    Args:
        points: Array of shape (n_points, dim)
        k_min: Smallest number of clusters (>= 1)
        k_max: Largest number of clusters (<= n_points)
        max_iterations: Iteration cap per run
        tolerance: Convergence tolerance (0 = exact equality)
        random_seed: Seed or SeedSequence for the per-k generators
        n_jobs: Number of worker threads
        cancel_event: Event checked between iterations of every run
        deadline: ``time.monotonic()`` instant checked between iterations
        low: Lower bound of the random initialization box
        high: Upper bound of the random initialization box
        verbose: Whether to print progress

    Returns:
        List of (ClusteringResult, inertia) indexed by k - k_min
    """
    if len(points) == 0:
        raise EmptyDatasetError("Cannot cluster an empty dataset")

    points = _as_points(points)
    n_points = len(points)

    if k_min < 1 or k_max < k_min:
        raise InvalidKError(f"Invalid k range [{k_min}, {k_max}]")
    if k_max > n_points:
        raise InvalidKError(f"k_max={k_max} exceeds the number of points ({n_points})")
    if n_jobs < 1:
        raise ValueError(f"n_jobs must be >= 1, got {n_jobs}")

    k_values = list(range(k_min, k_max + 1))
    if not isinstance(random_seed, np.random.SeedSequence):
        random_seed = np.random.SeedSequence(random_seed)
    seeds = random_seed.spawn(len(k_values))

    def _evaluate(k: int, seed: np.random.SeedSequence) -> Tuple[ClusteringResult, float]:
        result = run(
            points, k,
            max_iterations=max_iterations,
            rng=np.random.default_rng(seed),
            tolerance=tolerance,
            cancel_event=cancel_event,
            deadline=deadline,
            low=low,
            high=high
        )
        return result, inertia(points, result.centroids, result.labels)

    if verbose:
        print(f"\n[Clustering] Running k-means for k={k_min}..{k_max} on {n_points} points...")

    if n_jobs == 1:
        evaluated = [_evaluate(k, seed) for k, seed in zip(k_values, seeds)]
    else:
        with ThreadPoolExecutor(max_workers=n_jobs) as executor:
            evaluated = list(executor.map(_evaluate, k_values, seeds))

    if verbose:
        for result, value in evaluated:
            print(f"  k={result.k}: inertia = {value:.4f} ({_describe(result)})")
        print(f"✓ Evaluated {len(evaluated)} cluster counts")

    return evaluated
