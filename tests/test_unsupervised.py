import math

import pytest

from mlprims.supervised import euclidean_distance
from mlprims.unsupervised import (
    HierarchicalClusteringResult,
    hierarchical_clustering,
    kmeans_clustering,
)

EXAMPLE_DATA = [
    [1.0, 2.0], [1.5, 1.8], [5.0, 8.0], [8.0, 8.0],
    [1.0, 0.6], [9.0, 11.0], [8.0, 2.0], [10.0, 2.0],
]
EXAMPLE_CENTROIDS = [[1.0, 2.0], [5.0, 8.0]]


def _members(data, labels, cluster):
    return [p for p, label in zip(data, labels) if label == cluster]


def test_two_separated_groups_are_split():
    data = [[0.0, 0.0], [0.0, 1.0], [10.0, 10.0], [10.0, 11.0]]
    labels, centroids = kmeans_clustering(data, [[0.0, 0.0], [10.0, 10.0]])
    assert labels == [0, 0, 1, 1]
    assert centroids[0] == pytest.approx([0.0, 0.5])
    assert centroids[1] == pytest.approx([10.0, 10.5])


def test_converged_centroids_are_means_of_their_members():
    labels, centroids = kmeans_clustering(EXAMPLE_DATA, EXAMPLE_CENTROIDS)
    assert len(labels) == len(EXAMPLE_DATA)
    for cluster, centroid in enumerate(centroids):
        members = _members(EXAMPLE_DATA, labels, cluster)
        assert members
        for axis in range(2):
            expected = sum(p[axis] for p in members) / len(members)
            assert centroid[axis] == pytest.approx(expected, abs=1e-4)


def test_converged_labels_point_to_nearest_centroid():
    labels, centroids = kmeans_clustering(EXAMPLE_DATA, EXAMPLE_CENTROIDS)
    for point, label in zip(EXAMPLE_DATA, labels):
        own = euclidean_distance(point, centroids[label])
        assert all(own <= euclidean_distance(point, c) + 1e-9 for c in centroids)


def test_single_iteration_moves_centroids_to_first_assignment_means():
    labels, centroids = kmeans_clustering(
        EXAMPLE_DATA, EXAMPLE_CENTROIDS, max_iterations=1
    )
    for cluster, centroid in enumerate(centroids):
        members = _members(EXAMPLE_DATA, labels, cluster)
        assert centroid[0] == pytest.approx(sum(p[0] for p in members) / len(members))


def test_initial_centroids_are_not_modified():
    initial = [list(c) for c in EXAMPLE_CENTROIDS]
    kmeans_clustering(EXAMPLE_DATA, initial)
    assert initial == EXAMPLE_CENTROIDS


def test_empty_cluster_gets_nan_centroid():
    data = [[0.0], [1.0]]
    labels, centroids = kmeans_clustering(data, [[0.5], [100.0]])
    assert labels == [0, 0]
    assert math.isnan(centroids[1][0])
    assert centroids[0][0] == pytest.approx(0.5)


@pytest.mark.parametrize(
    "data, centroids",
    [
        ([], [[0.0]]),
        ([[0.0]], []),
        ([[0.0, 1.0]], [[0.0]]),
        ([[0.0, 1.0], [1.0]], [[0.0, 1.0]]),
    ],
)
def test_kmeans_rejects_bad_shapes(data, centroids):
    with pytest.raises(ValueError):
        kmeans_clustering(data, centroids)


def test_kmeans_rejects_zero_iterations():
    with pytest.raises(ValueError):
        kmeans_clustering([[0.0]], [[0.0]], max_iterations=0)


def test_hierarchical_puts_each_point_in_own_cluster():
    result = hierarchical_clustering(EXAMPLE_DATA)
    assert isinstance(result, HierarchicalClusteringResult)
    assert result.clusters == list(range(len(EXAMPLE_DATA)))


def test_hierarchical_distances_are_symmetric_with_zero_diagonal():
    result = hierarchical_clustering(EXAMPLE_DATA)
    n = len(EXAMPLE_DATA)
    assert len(result.distances) == n
    for i in range(n):
        assert result.distances[i][i] == 0.0
        for j in range(n):
            assert result.distances[i][j] == pytest.approx(result.distances[j][i])
            assert result.distances[i][j] == pytest.approx(
                euclidean_distance(EXAMPLE_DATA[i], EXAMPLE_DATA[j])
            )


def test_hierarchical_distance_of_right_triangle():
    result = hierarchical_clustering([[0.0, 0.0], [3.0, 4.0]])
    assert result.distances[0][1] == pytest.approx(5.0)


def test_hierarchical_rejects_empty_data():
    with pytest.raises(ValueError):
        hierarchical_clustering([])