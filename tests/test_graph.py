import pytest

from flightgraph.domain.errors import (
    GraphError,
    InvalidEndpointError,
    NoPathError,
    UnknownVertexError,
)
from flightgraph.domain.models import TreeEdge
from flightgraph.graph import WeightedGraph


@pytest.fixture
def path_graph():
    """Six-vertex directed graph used for shortest-path checks."""
    graph = WeightedGraph()
    for vertex in "ABCDEF":
        graph.insert_vertex(vertex)
    graph.insert_edge("A", "B", 6)
    graph.insert_edge("A", "C", 2)
    graph.insert_edge("A", "D", 5)
    graph.insert_edge("B", "E", 1)
    graph.insert_edge("B", "C", 2)
    graph.insert_edge("C", "B", 3)
    graph.insert_edge("C", "F", 1)
    graph.insert_edge("D", "E", 3)
    graph.insert_edge("E", "A", 4)
    graph.insert_edge("F", "A", 1)
    graph.insert_edge("F", "D", 1)
    return graph


@pytest.fixture
def tree_graph():
    graph = WeightedGraph()
    for vertex in "ABCD":
        graph.insert_vertex(vertex)
    graph.insert_edge("A", "B", 1)
    graph.insert_edge("A", "D", 3)
    graph.insert_edge("B", "D", 2)
    graph.insert_edge("D", "C", 5)
    graph.insert_edge("C", "A", 4)
    return graph


def test_new_graph_is_empty():
    graph = WeightedGraph()
    assert graph.is_empty()
    assert graph.get_vertex_count() == 0
    assert graph.get_edge_count() == 0
    assert len(graph) == 0


def test_duplicate_vertices_collapse():
    graph = WeightedGraph()
    assert graph.insert_vertex("A") is True
    assert graph.insert_vertex("B") is True
    assert graph.insert_vertex("A") is False

    assert graph.get_vertex_count() == 2
    assert not graph.is_empty()
    assert graph.contains_vertex("A")
    assert "B" in graph
    assert not graph.contains_vertex("Z")


def test_insert_none_vertex_rejected():
    graph = WeightedGraph()
    with pytest.raises(ValueError):
        graph.insert_vertex(None)


def test_edge_count_grows_once_per_ordered_pair():
    graph = WeightedGraph()
    graph.insert_vertex("A")
    graph.insert_vertex("B")

    assert graph.insert_edge("A", "B", 3) is True
    assert graph.get_edge_count() == 1

    assert graph.insert_edge("A", "B", 7) is False
    assert graph.get_edge_count() == 1
    assert graph.get_weight("A", "B") == 7

    # Reverse direction is a separate edge
    graph.insert_edge("B", "A", 2)
    assert graph.get_edge_count() == 2
    assert graph.contains_edge("A", "B")
    assert graph.contains_edge("B", "A")


def test_insert_edge_requires_known_endpoints():
    graph = WeightedGraph()
    graph.insert_vertex("A")

    with pytest.raises(InvalidEndpointError) as excinfo:
        graph.insert_edge("A", "B", 1)
    assert excinfo.value.vertex == "B"

    with pytest.raises(InvalidEndpointError) as excinfo:
        graph.insert_edge("Z", "A", 1)
    assert excinfo.value.vertex == "Z"

    assert graph.get_edge_count() == 0
    assert graph.get_vertex_count() == 1


def test_get_weight_errors():
    graph = WeightedGraph()
    graph.insert_vertex("A")
    graph.insert_vertex("B")

    with pytest.raises(UnknownVertexError):
        graph.get_weight("A", "Z")
    with pytest.raises(GraphError):
        graph.get_weight("A", "B")


def test_neighbors_and_edges(path_graph):
    assert path_graph.neighbors("A") == {"B": 6, "C": 2, "D": 5}
    assert len(list(path_graph.edges())) == path_graph.get_edge_count() == 11
    assert ("F", "D", 1) in set(path_graph.edges())
    assert sorted(path_graph.vertices()) == list("ABCDEF")


def test_shortest_path_costs(path_graph):
    assert path_graph.get_path_cost("B", "F") == 3
    assert path_graph.get_path_cost("A", "B") == 5
    assert path_graph.get_path_cost("A", "E") == 6


def test_shortest_path_sequences(path_graph):
    assert path_graph.shortest_path("A", "B") == ["A", "C", "B"]
    assert path_graph.shortest_path("B", "F") == ["B", "C", "F"]
    assert path_graph.shortest_path("A", "E") == ["A", "C", "B", "E"]


def test_path_to_self_is_free(path_graph):
    assert path_graph.get_path_cost("D", "D") == 0
    assert path_graph.shortest_path("D", "D") == ["D"]


def test_path_cost_is_integer_for_integer_weights(path_graph):
    assert isinstance(path_graph.get_path_cost("A", "E"), int)


def test_float_weights():
    graph = WeightedGraph.from_edges([("A", "B", 1.5), ("B", "C", 2.25), ("A", "C", 4.0)])
    assert graph.get_path_cost("A", "C") == pytest.approx(3.75)
    assert graph.shortest_path("A", "C") == ["A", "B", "C"]


def test_equal_cost_paths_prefer_first_discovered():
    graph = WeightedGraph()
    for vertex in ["S", "X", "Y", "T"]:
        graph.insert_vertex(vertex)
    graph.insert_edge("S", "X", 1)
    graph.insert_edge("S", "Y", 1)
    graph.insert_edge("X", "T", 1)
    graph.insert_edge("Y", "T", 1)

    assert graph.shortest_path("S", "T") == ["S", "X", "T"]


def test_unreachable_destination_raises_no_path():
    graph = WeightedGraph()
    graph.insert_vertex("A")
    graph.insert_vertex("B")
    graph.insert_edge("B", "A", 1)

    with pytest.raises(NoPathError) as excinfo:
        graph.get_path_cost("A", "B")
    assert excinfo.value.source == "A"
    assert excinfo.value.target == "B"

    with pytest.raises(NoPathError):
        graph.shortest_path("A", "B")


def test_unknown_endpoints_raise(path_graph):
    with pytest.raises(UnknownVertexError):
        path_graph.get_path_cost("A", "Z")
    with pytest.raises(UnknownVertexError) as excinfo:
        path_graph.shortest_path("Z", "A")
    assert excinfo.value.vertex == "Z"


def test_queries_do_not_mutate(path_graph):
    before = sorted(path_graph.edges())
    path_graph.shortest_path("A", "E")
    path_graph.get_min_spanning_tree("A")
    assert sorted(path_graph.edges()) == before
    assert path_graph.get_vertex_count() == 6


def test_min_spanning_tree_cost(tree_graph):
    assert tree_graph.get_min_spanning_tree_cost("A") == 8


def test_min_spanning_tree_edges_in_selection_order(tree_graph):
    assert tree_graph.get_min_spanning_tree_edges("A") == [
        TreeEdge("A", "B", 1),
        TreeEdge("B", "D", 2),
        TreeEdge("D", "C", 5),
    ]


def test_min_spanning_tree_graph_matches_cost(tree_graph):
    tree = tree_graph.get_min_spanning_tree("A")

    assert tree.get_vertex_count() == 4
    assert tree.get_edge_count() == 3
    assert tree.contains_edge("A", "B")
    assert tree.contains_edge("B", "D")
    assert tree.contains_edge("D", "C")
    assert not tree.contains_edge("A", "D")
    assert tree.total_weight() == tree_graph.get_min_spanning_tree_cost("A")


def test_min_spanning_tree_covers_reachable_component_only():
    graph = WeightedGraph()
    for vertex in "ABCD":
        graph.insert_vertex(vertex)
    graph.insert_edge("A", "B", 2)
    graph.insert_edge("C", "D", 1)

    tree = graph.get_min_spanning_tree("A")
    assert sorted(tree.vertices()) == ["A", "B"]
    assert graph.get_min_spanning_tree_cost("A") == 2


def test_min_spanning_tree_of_isolated_root():
    graph = WeightedGraph()
    graph.insert_vertex("A")

    assert graph.get_min_spanning_tree_cost("A") == 0
    assert graph.get_min_spanning_tree("A").get_vertex_count() == 1


def test_min_spanning_tree_unknown_root(tree_graph):
    with pytest.raises(UnknownVertexError):
        tree_graph.get_min_spanning_tree("Z")
    with pytest.raises(UnknownVertexError):
        tree_graph.get_min_spanning_tree_cost("Z")
