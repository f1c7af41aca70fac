import pytest

from pathtable.domain.errors import (
    EdgeNotFoundError,
    InvalidLabelError,
    InvalidWeightError,
    VertexOutOfRangeError,
)
from pathtable.domain.models import Edge, Vertex
from pathtable.graph import WeightedDigraph


def test_new_graph_has_unlabelled_vertices():
    graph = WeightedDigraph(3)

    assert graph.vertex_count == 3
    assert len(graph) == 3
    assert graph.vertices() == (Vertex(1), Vertex(2), Vertex(3))
    assert graph.edge_count == 0


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        WeightedDigraph(-1)


def test_insert_edge_appends_in_insertion_order():
    graph = WeightedDigraph(3)

    assert graph.insert_edge(1, 3, 9) is True
    assert graph.insert_edge(1, 2, 5) is True

    assert graph.edges_of(1) == (Edge(3, 9), Edge(2, 5))
    assert graph.edges_of(2) == ()


def test_duplicate_insertion_overwrites_weight(triangle):
    before = triangle.edge_count

    triangle.insert_edge(1, 2, 42)

    assert triangle.edge_count == before
    assert [e for e in triangle.edges_of(1) if e.destination == 2] == [Edge(2, 42)]
    assert triangle.edge_weight(1, 2) == 42


def test_duplicate_of_last_edge_is_not_appended():
    graph = WeightedDigraph(3)
    graph.insert_edge(1, 2, 1)
    graph.insert_edge(1, 3, 1)

    graph.insert_edge(1, 3, 7)

    assert graph.edges_of(1) == (Edge(2, 1), Edge(3, 7))


def test_negative_weight_is_rejected_without_mutation(triangle):
    revision = triangle.revision

    with pytest.raises(InvalidWeightError) as excinfo:
        triangle.insert_edge(3, 1, -4)

    assert excinfo.value.weight == -4
    assert not triangle.has_edge(3, 1)
    assert triangle.revision == revision


def test_zero_weight_is_allowed():
    graph = WeightedDigraph(2)
    assert graph.insert_edge(1, 2, 0)
    assert graph.edge_weight(1, 2) == 0


@pytest.mark.parametrize("source,destination", [(0, 1), (1, 4), (-1, 2), (4, 4)])
def test_out_of_range_indices_are_rejected(triangle, source, destination):
    with pytest.raises(VertexOutOfRangeError):
        triangle.insert_edge(source, destination, 1)
    assert triangle.edge_count == 3


def test_insert_then_remove_restores_adjacency(triangle):
    before = triangle.edges_of(2)

    triangle.insert_edge(2, 1, 4)
    assert triangle.remove_edge(2, 1) is True

    assert triangle.edges_of(2) == before


def test_remove_head_edge_keeps_rest_in_order():
    graph = WeightedDigraph(4)
    graph.insert_edge(1, 2, 1)
    graph.insert_edge(1, 3, 2)
    graph.insert_edge(1, 4, 3)

    graph.remove_edge(1, 2)

    assert graph.edges_of(1) == (Edge(3, 2), Edge(4, 3))


def test_remove_interior_edge_keeps_rest_in_order():
    graph = WeightedDigraph(4)
    graph.insert_edge(1, 2, 1)
    graph.insert_edge(1, 3, 2)
    graph.insert_edge(1, 4, 3)

    graph.remove_edge(1, 3)

    assert graph.edges_of(1) == (Edge(2, 1), Edge(4, 3))


def test_remove_missing_edge_raises(triangle):
    with pytest.raises(EdgeNotFoundError) as excinfo:
        triangle.remove_edge(3, 1)

    assert excinfo.value.source == 3
    assert excinfo.value.destination == 1
    assert triangle.edge_count == 3


def test_remove_from_vertex_without_edges_raises():
    graph = WeightedDigraph(2)
    with pytest.raises(EdgeNotFoundError):
        graph.remove_edge(1, 2)


def test_safe_variants_report_failure_as_false(triangle):
    assert triangle.insert_edge_safe(1, 2, -1) is False
    assert triangle.insert_edge_safe(1, 9, 1) is False
    assert triangle.remove_edge_safe(3, 1) is False
    assert triangle.remove_edge_safe(1, 3) is True
    assert not triangle.has_edge(1, 3)


def test_edges_of_is_a_snapshot(triangle):
    view = triangle.edges_of(1)
    triangle.insert_edge(1, 1, 3)

    assert len(view) == 2
    assert len(triangle.edges_of(1)) == 3
    assert triangle.edges_of(1) == triangle.edges_of(1)


def test_labels_are_bounded():
    graph = WeightedDigraph(1, max_label_length=5)

    graph.set_vertex_label(1, "Attic")
    assert graph.label(1) == "Attic"

    with pytest.raises(InvalidLabelError):
        graph.set_vertex_label(1, "Basement")
    assert graph.label(1) == "Attic"


def test_label_out_of_range(triangle):
    with pytest.raises(VertexOutOfRangeError):
        triangle.label(4)


def test_revision_tracks_topology_changes(triangle):
    revision = triangle.revision

    triangle.set_vertex_label(1, "Pantry")
    assert triangle.revision == revision

    triangle.insert_edge(3, 1, 1)
    assert triangle.revision == revision + 1

    triangle.remove_edge(3, 1)
    assert triangle.revision == revision + 2


def test_set_vertex_count_replaces_graph(triangle):
    triangle.set_vertex_count(2)

    assert triangle.vertex_count == 2
    assert triangle.edge_count == 0
    assert triangle.label(1) == ""


def test_clear_empties_graph(triangle):
    triangle.clear()

    assert triangle.vertex_count == 0
    assert list(triangle.iter_edges()) == []


def test_iter_edges_lists_triples(triangle):
    assert list(triangle.iter_edges()) == [(1, 2, 5), (1, 3, 9), (2, 3, 2)]


def test_clone_is_equal_and_independent(triangle):
    copy = triangle.clone()

    assert copy == triangle
    assert copy is not triangle

    copy.insert_edge(1, 2, 100)
    copy.remove_edge(2, 3)
    copy.set_vertex_label(1, "Cellar")

    assert triangle.edge_weight(1, 2) == 5
    assert triangle.has_edge(2, 3)
    assert triangle.label(1) == "Kitchen"
    assert copy != triangle


def test_contains_checks_index_range(triangle):
    assert 1 in triangle
    assert 3 in triangle
    assert 0 not in triangle
    assert 4 not in triangle
    assert "1" not in triangle
