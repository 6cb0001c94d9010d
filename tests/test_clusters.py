"""
Тести LargestClusters.
"""
import pytest

from conn3d.geom import Pt
from conn3d.edges import enumerate_edges
from conn3d.clusters import circuit_sizes, largest_clusters, product_of_largest

pytestmark = [pytest.mark.unit]


def test_reference_scenario(example_points, example_edges):
    assert largest_clusters(example_points, example_edges, 10) == 40


def test_reference_sizes(example_points, example_edges):
    assert circuit_sizes(example_points, example_edges, 10) == [5, 4, 2, 2] + [1] * 7


@pytest.mark.parametrize("limit", [0, 1, 5, 10, 57, 189, 190])
def test_sizes_sum_to_point_count(example_points, example_edges, limit):
    assert sum(circuit_sizes(example_points, example_edges, limit)) == len(example_points)


def test_limit_beyond_edge_count_applies_everything(example_points, example_edges):
    assert circuit_sizes(example_points, example_edges, 10_000) == [20]
    assert largest_clusters(example_points, example_edges, 10_000) == 20


def test_zero_limit_leaves_singletons(example_points, example_edges):
    assert largest_clusters(example_points, example_edges, 0) == 1


def test_single_point():
    points = [Pt(7, 7, 7)]
    edges = enumerate_edges(points)
    assert edges == ()
    assert circuit_sizes(points, edges, 10) == [1]
    assert largest_clusters(points, edges, 10) == 1


def test_empty_input():
    assert circuit_sizes([], (), 10) == []
    assert largest_clusters([], (), 10) == 1


def test_fewer_than_three_components_use_factor_one():
    points = [(0, 0, 0), (1, 0, 0), (50, 0, 0)]
    edges = enumerate_edges(points)
    assert circuit_sizes(points, edges, 1) == [2, 1]
    assert largest_clusters(points, edges, 1) == 2


def test_duplicate_points_count_once():
    points = [(0, 0, 0), (0, 0, 0), (9, 9, 9)]
    edges = enumerate_edges(points)
    assert circuit_sizes(points, edges, 1) == [1, 1]


def test_top_parameter(example_points, example_edges):
    assert largest_clusters(example_points, example_edges, 10, top=1) == 5
    assert largest_clusters(example_points, example_edges, 10, top=0) == 1


def test_product_of_largest_sorts_input():
    assert product_of_largest([1, 3, 2, 4]) == 24


@pytest.mark.parametrize("kwargs", [{"limit": -1}, {"top": -1}, {"backend": "cuda"}])
def test_invalid_arguments(example_points, example_edges, kwargs):
    with pytest.raises(ValueError):
        largest_clusters(example_points, example_edges, **kwargs)


@pytest.mark.parametrize("limit", [0, 3, 10, 40, 190])
def test_scipy_backend_matches_dfs(example_points, example_edges, limit):
    pytest.importorskip("scipy")
    assert circuit_sizes(example_points, example_edges, limit, backend="scipy") == \
        circuit_sizes(example_points, example_edges, limit, backend="python")


def test_fractional_points_do_not_collapse():
    with pytest.raises(ValueError):
        circuit_sizes([(1.2, 0, 0), (1.7, 0, 0), (5, 0, 0)], (), 0)
