import math

import numpy as np
import pytest

from kmeans_elbow.data import generate_dataset
from kmeans_elbow.errors import EmptyDatasetError, InvalidKError
from kmeans_elbow.evaluation import print_elbow_summary, summarize_elbow
from kmeans_elbow.evaluation.summary import SUMMARY_COLUMNS
from kmeans_elbow.pipeline import compute, make_regenerator


def test_generate_dataset_is_read_only():
    points = generate_dataset(50, 3, random_seed=0, verbose=False)
    assert points.shape == (50, 3)
    with pytest.raises(ValueError):
        points[0, 0] = 1.0


def test_generate_dataset_reproducible():
    a = generate_dataset(20, random_seed=9, verbose=False)
    b = generate_dataset(20, random_seed=9, verbose=False)
    np.testing.assert_array_equal(a, b)


def test_compute_defaults():
    results = compute(random_seed=0)

    assert results.points.shape == (120, 2)
    assert results.k_values == list(range(1, 11))
    assert len(results.inertias) == 10


def test_compute_is_idempotent_for_a_seed():
    first = compute(n_points=40, k_max=5, random_seed=3)
    second = compute(n_points=40, k_max=5, random_seed=3)

    np.testing.assert_array_equal(first.points, second.points)
    assert first.inertias == second.inertias


def test_elbow_view():
    results = compute(n_points=30, k_min=2, k_max=6, random_seed=1)
    elbow = results.elbow_view()

    assert [k for k, _ in elbow] == [2, 3, 4, 5, 6]
    assert all(value >= 0.0 for _, value in elbow)


def test_clustering_view_lookup():
    results = compute(n_points=30, k_min=2, k_max=6, random_seed=1)

    view = results.clustering_view(1)
    assert view.k == 3
    assert view.points is results.points
    assert view.labels.shape == (30,)
    assert view.centroids.shape == (3, 2)
    assert results.view_for_k(5).k == 5

    with pytest.raises(IndexError):
        results.clustering_view(5)


def test_compute_rejects_k_above_point_count():
    with pytest.raises(InvalidKError):
        compute(n_points=5, k_max=10)


def test_compute_rejects_empty_dataset():
    with pytest.raises(EmptyDatasetError):
        compute(n_points=0)


def test_summary_table(capsys):
    results = compute(n_points=40, k_max=4, random_seed=5)
    summary = summarize_elbow(results.evaluated)

    assert list(summary.columns) == SUMMARY_COLUMNS
    assert summary['k'].tolist() == [1, 2, 3, 4]
    assert math.isnan(summary['inertia_drop'].iloc[0])
    assert summary['inertia'].tolist() == results.inertias
    assert (summary['max_cluster_size'] <= 40).all()
    assert summary.loc[0, 'min_cluster_size'] == 40

    print_elbow_summary(results.summary())
    out = capsys.readouterr().out
    assert "ELBOW SUMMARY" in out


def test_regenerator_is_reproducible_but_changes_data():
    first = make_regenerator(8, n_points=25, k_max=3)
    second = make_regenerator(8, n_points=25, k_max=3)

    a1, a2 = first(), first()
    b1, b2 = second(), second()

    assert not np.array_equal(a1.points, a2.points)
    np.testing.assert_array_equal(a1.points, b1.points)
    np.testing.assert_array_equal(a2.points, b2.points)
    assert a2.inertias == b2.inertias


def test_compute_accepts_seed_sequence():
    seed = np.random.SeedSequence(12)
    a = compute(n_points=20, k_max=3, random_seed=seed)
    b = compute(n_points=20, k_max=3, random_seed=np.random.SeedSequence(12))
    np.testing.assert_array_equal(a.points, b.points)
