import numpy as np
import pytest

from kmeans_elbow.errors import ShapeMismatchError
from kmeans_elbow.geometry import distance, pairwise_distances


def test_distance_known_value():
    assert distance([0, 0], [3, 4]) == pytest.approx(5.0)


def test_distance_is_symmetric():
    rng = np.random.default_rng(0)
    for _ in range(20):
        a, b = rng.uniform(-5, 5, size=(2, 3))
        assert distance(a, b) == distance(b, a)


def test_distance_zero_iff_equal():
    assert distance([1.5, -2.0], [1.5, -2.0]) == 0.0
    assert distance([1.5, -2.0], [1.5, -2.000001]) > 0.0


def test_distance_dimension_mismatch():
    with pytest.raises(ShapeMismatchError):
        distance([1, 2, 3], [1, 2])


def test_shape_mismatch_is_value_error():
    with pytest.raises(ValueError):
        distance([1], [1, 2])


def test_pairwise_distances_matches_distance():
    points = np.array([[0.0, 0.0], [1.0, 1.0], [3.0, 4.0]])
    centroids = np.array([[0.0, 0.0], [3.0, 4.0]])
    matrix = pairwise_distances(points, centroids)
    assert matrix.shape == (3, 2)
    for i, p in enumerate(points):
        for j, c in enumerate(centroids):
            assert matrix[i, j] == pytest.approx(distance(p, c))


def test_pairwise_distances_dimension_mismatch():
    with pytest.raises(ShapeMismatchError):
        pairwise_distances(np.zeros((4, 2)), np.zeros((2, 3)))
