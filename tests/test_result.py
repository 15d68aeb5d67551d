import numpy as np
import pytest

from core.cluster import Cluster
from core.errors import InvalidInputError
from core.result import ClusteringResult


@pytest.fixture
def result(separated_points):
    return ClusteringResult(
        points=separated_points,
        labels=[0, 0, 0, 1, 1, 1],
        centers=[[1 / 3, 1 / 3], [31 / 3, 31 / 3]],
        n_iter=2,
        converged=True,
        inertia_history=[10.0, 4.0]
    )


def test_result_arrays_are_read_only(result):
    with pytest.raises(ValueError):
        result.labels[0] = 1
    with pytest.raises(ValueError):
        result.centers[0, 0] = 5.0
    with pytest.raises(ValueError):
        result.points[0, 0] = 5.0


def test_result_is_decoupled_from_caller_arrays(separated_points):
    labels = np.array([0, 0, 0, 1, 1, 1])
    result = ClusteringResult(separated_points, labels, np.zeros((2, 2)), 1, False, [1.0])
    labels[0] = 1
    assert result.labels[0] == 0


def test_result_queries(result, separated_points):
    assert len(result) == 6
    assert result.n_clusters == 2
    np.testing.assert_array_equal(result.indices_with_label(1), [3, 4, 5])
    np.testing.assert_array_equal(result.points_with_label(0), separated_points[:3])
    np.testing.assert_array_equal(result.cluster_sizes(), [3, 3])
    assert result.inertia == pytest.approx(8.0 / 3.0)
    assert result.inertia_history == (10.0, 4.0)
    assert "converged=True" in repr(result)


@pytest.mark.parametrize("label", [-1, 2])
def test_result_rejects_out_of_range_label(result, label):
    with pytest.raises(InvalidInputError):
        result.indices_with_label(label)


def test_result_to_frame(result):
    df = result.to_frame()
    assert list(df.columns) == ["x0", "x1", "label"]
    assert df["label"].tolist() == [0, 0, 0, 1, 1, 1]
    assert df.loc[4, "x0"] == 11.0


def test_clusters_from_result(result, separated_points):
    clusters = Cluster.from_result(result)

    assert [c.id for c in clusters] == [0, 1]
    assert clusters[1].point_indices == [3, 4, 5]
    assert clusters[0].get_point_count() == 3
    assert not clusters[0].is_empty()

    stats = clusters[0].get_stats(separated_points)
    assert stats['n_points'] == 3
    assert stats['sum_of_squares'] == pytest.approx(4.0 / 3.0)
    assert stats['max_distance'] == pytest.approx(np.sqrt(5.0) / 3.0)
    assert stats['representative_index'] == 0
    assert stats['representative_distance'] == pytest.approx(np.sqrt(2.0) / 3.0)
    assert clusters[1].get_stats(separated_points)['representative_index'] == 3
    assert str(clusters[0]) == "Cluster 0: 3 points around (0.3333, 0.3333)"


def test_empty_cluster_stats(separated_points):
    cluster = Cluster(id=4, center=(0.0, 0.0))
    assert cluster.is_empty()
    assert cluster.get_stats(separated_points) == {
        'id': 4, 'center': (0.0, 0.0), 'n_points': 0, 'sum_of_squares': 0.0
    }
