"""
Тести лісу компонент (ComponentForest).
"""
import pytest

from conn3d.geom import Pt
from conn3d.forest import ComponentForest

pytestmark = [pytest.mark.unit]

A, B, C, D, E = (Pt(i, 0, 0) for i in range(5))


def test_both_unassigned_creates_component():
    forest = ComponentForest()
    assert forest.apply((A, B))
    assert forest.components == [{A, B}]


def test_one_side_assigned_joins_existing():
    forest = ComponentForest()
    forest.apply((A, B))
    assert forest.apply((B, C))
    assert forest.apply((D, A))
    assert forest.components == [{A, B, C, D}]


def test_merge_absorbs_smaller_index():
    forest = ComponentForest()
    forest.apply((A, B))
    forest.apply((C, D))
    assert forest.apply((A, D))
    assert len(forest) == 1
    assert forest.components[0] == {A, B, C, D}


def test_apply_is_idempotent():
    forest = ComponentForest()
    forest.apply((A, B))
    forest.apply((B, C))
    before = [set(c) for c in forest.components]
    assert not forest.apply((A, B))
    assert not forest.apply((C, A))
    assert forest.components == before


def test_component_sizes_counts_untouched_as_one():
    forest = ComponentForest()
    forest.apply((A, B))
    forest.apply((B, C))
    assert forest.component_sizes([A, B, C, D, E]) == [3, 3, 3, 1, 1]
    # запит без побічних ефектів
    assert forest.component_sizes([D]) == [1]
    assert len(forest) == 1


def test_component_of_and_largest():
    forest = ComponentForest()
    assert forest.largest() == 0
    assert forest.component_of(A) == {A}
    forest.apply((A, B))
    assert forest.component_of(B) == {A, B}
    assert forest.largest() == 2
    assert forest.spans(2)
    assert not forest.spans(3)


def test_apply_accepts_edges(example_edges):
    forest = ComponentForest()
    # з перших 10 ребер одне з'єднує вже з'єднані точки
    assert forest.apply_all(example_edges[:10]) == 9
    report = forest.validate()
    assert report["shared_points"] == []
    assert report["empty_components"] == []
    assert report["assigned_points"] == 13


def test_full_sequence_is_order_independent(example_points, example_edges):
    forward, backward = ComponentForest(), ComponentForest()
    forward.apply_all(example_edges)
    backward.apply_all(reversed(example_edges))
    assert forward.components == [set(example_points)]
    assert backward.components == [set(example_points)]


def test_self_edge_from_duplicate_point():
    forest = ComponentForest()
    forest.apply((A, A))
    assert forest.component_sizes([A]) == [1]
    assert forest.validate()["assigned_points"] == 1


def test_sizes_one_per_component():
    forest = ComponentForest()
    forest.apply((A, B))
    forest.apply((C, D))
    forest.apply((B, C))
    assert forest.sizes([A, B, C, D, E]) == [4, 1]
    assert ComponentForest().sizes([A, B]) == [1, 1]
