import numpy as np
import pytest
from scipy.stats import chisquare

from core.errors import InvalidConfigurationError
from utils.initializers import (
    InitMethod,
    bounding_box_init,
    initialize_centers,
    kmeans_plus_plus_init,
    kmeans_plus_plus_next_index,
    random_init,
)


def _rows(array):
    return {tuple(row) for row in array}


def test_init_method_parse():
    assert InitMethod.parse("random") is InitMethod.RANDOM
    assert InitMethod.parse("KMEANS++") is InitMethod.KMEANS_PLUS_PLUS
    assert InitMethod.parse(InitMethod.BOUNDING_BOX) is InitMethod.BOUNDING_BOX
    with pytest.raises(InvalidConfigurationError):
        InitMethod.parse("forgy")


def test_random_init_picks_distinct_existing_points(blob_points):
    centers = random_init(blob_points, 10, np.random.default_rng(1))
    assert centers.shape == (10, 3)
    assert len(_rows(centers)) == 10
    assert _rows(centers) <= _rows(blob_points)


def test_random_init_with_k_equal_to_n(square_points):
    centers = random_init(square_points, 4, np.random.default_rng(5))
    assert _rows(centers) == _rows(square_points)


def test_bounding_box_init_stays_inside_box(blob_points):
    centers = bounding_box_init(blob_points, 25, np.random.default_rng(2))
    assert centers.shape == (25, 3)
    assert np.all(centers >= blob_points.min(axis=0))
    assert np.all(centers <= blob_points.max(axis=0))


def test_kmeans_plus_plus_with_k_equal_to_n(square_points):
    centers = kmeans_plus_plus_init(square_points, 4, np.random.default_rng(0))
    assert _rows(centers) == _rows(square_points)


def test_kmeans_plus_plus_with_duplicates_terminates():
    points = np.array([[0.0, 0.0], [0.0, 0.0], [0.0, 0.0], [1.0, 1.0]])
    for seed in range(20):
        centers = kmeans_plus_plus_init(points, 4, np.random.default_rng(seed))
        assert centers.shape == (4, 2)
        assert (1.0, 1.0) in _rows(centers)


def test_kmeans_plus_plus_next_index_never_repeats(blob_points):
    rng = np.random.default_rng(9)
    chosen = [0, 5, 17]
    for _ in range(200):
        assert kmeans_plus_plus_next_index(blob_points, chosen, rng) not in chosen


def test_kmeans_plus_plus_sampling_follows_squared_distance():
    # Seed at 0; candidates at distance 1, 2 and 4 carry weights 1, 4 and 16
    points = np.array([[0.0], [1.0], [2.0], [4.0]])
    rng = np.random.default_rng(2024)
    trials = 6000

    picks = [kmeans_plus_plus_next_index(points, [0], rng) for _ in range(trials)]

    observed = [picks.count(i) for i in (1, 2, 3)]
    expected = [trials * w / 21.0 for w in (1, 4, 16)]
    assert picks.count(0) == 0
    assert chisquare(observed, expected).pvalue > 0.001


def test_initialize_centers_is_reproducible_with_same_seed(blob_points):
    for method in InitMethod:
        a = initialize_centers(blob_points, 4, method, np.random.default_rng(11))
        b = initialize_centers(blob_points, 4, method.value, np.random.default_rng(11))
        np.testing.assert_array_equal(a, b)


@pytest.mark.parametrize("k", [0, 5])
def test_initialize_centers_rejects_bad_k(square_points, k):
    with pytest.raises(InvalidConfigurationError):
        initialize_centers(square_points, k, InitMethod.RANDOM, np.random.default_rng(0))
