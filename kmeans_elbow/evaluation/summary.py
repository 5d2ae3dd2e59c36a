"""
Tabular summaries of an elbow evaluation.

Turns the (ClusteringResult, inertia) pairs produced by
``evaluate_range`` into a DataFrame with one row per k.
"""

import numpy as np
import pandas as pd
from typing import List, Tuple

from ..clustering import ClusteringResult


SUMMARY_COLUMNS = [
    'k', 'inertia', 'inertia_drop', 'n_iter', 'status',
    'converged', 'min_cluster_size', 'max_cluster_size', 'empty_clusters'
]


def summarize_elbow(evaluated: List[Tuple[ClusteringResult, float]]) -> pd.DataFrame:
    """
    Build a per-k summary table.

    ``inertia_drop`` is the relative decrease of inertia with respect
    to the previous k (NaN for the first row).

    Args:
        evaluated: Output of ``evaluate_range``

    Returns:
        DataFrame with the columns in SUMMARY_COLUMNS
    """
    rows = []
    for result, value in evaluated:
        sizes = np.bincount(result.labels, minlength=result.k)
        rows.append({
            'k': result.k,
            'inertia': value,
            'n_iter': result.n_iter,
            'status': result.status.value,
            'converged': result.converged,
            'min_cluster_size': int(sizes.min()),
            'max_cluster_size': int(sizes.max()),
            'empty_clusters': int((sizes == 0).sum())
        })

    df = pd.DataFrame(rows, columns=[c for c in SUMMARY_COLUMNS if c != 'inertia_drop'])
    previous = df['inertia'].shift(1)
    df.insert(2, 'inertia_drop', (previous - df['inertia']) / previous)
    return df


def print_elbow_summary(summary: pd.DataFrame):
    """Print the per-k summary table."""
    print("\n" + "="*80)
    print("ELBOW SUMMARY")
    print("="*80)
    print(f"{'k':>4} {'Inertia':>14} {'Drop':>8} {'Iter':>6} {'Sizes':>11}  Status")
    print("-"*80)

    for _, row in summary.iterrows():
        drop = "" if pd.isna(row['inertia_drop']) else f"{row['inertia_drop']:.1%}"
        sizes = f"{row['min_cluster_size']}-{row['max_cluster_size']}"
        print(f"{row['k']:>4} {row['inertia']:>14.4f} {drop:>8} {row['n_iter']:>6} "
              f"{sizes:>11}  {row['status']}")
