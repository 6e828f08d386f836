# tests/api_test/test_graph.py
"""
Tests for the Graph model (layout_api/models/graph.py).

Covers:
    • Construction: deduplication, first occurrence wins, preconditions
    • Adjacency index (incident edges, neighbors, self-loops)
    • Undirected pairwise lookup (try_get_edge)
    • Isolated vertices
    • Example graphs (grid, pentagram)
"""
import itertools

import pytest

from layout_api.models.vertex import Vertex
from layout_api.models.edge import Edge
from layout_api.models.graph import Graph
from layout_api.exceptions import VertexNotFoundError


@pytest.fixture
def path_graph():
    """
    A —1— B —2— C
    """
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    ab, bc = Edge(a, b, 1.0), Edge(b, c, 2.0)
    return (a, b, c), (ab, bc), Graph([ab, bc])


# ═════════════════════════════════════════════════════════════════
#  CONSTRUCTION
# ═════════════════════════════════════════════════════════════════

class TestConstruction:

    def test_empty_graph(self):
        g = Graph([])
        assert g.edges == ()
        assert g.vertices == ()
        assert len(g) == 0

    def test_none_edges_raises(self):
        with pytest.raises(ValueError, match="edge sequence"):
            Graph(None)

    def test_none_vertices_raises(self):
        with pytest.raises(ValueError):
            Graph([], vertices=None)

    def test_non_edge_item_raises(self):
        with pytest.raises(ValueError, match="Expected an Edge"):
            Graph([Vertex("A")])

    def test_non_vertex_item_raises(self):
        with pytest.raises(ValueError, match="Expected a Vertex"):
            Graph([], vertices=["A"])

    def test_accepts_any_iterable(self):
        a, b = Vertex("A"), Vertex("B")
        g = Graph(e for e in [Edge(a, b, 1.0)])
        assert g.get_number_of_edges() == 1

    def test_reversed_duplicate_is_dropped(self):
        a, b = Vertex("A"), Vertex("B")
        g = Graph([Edge(a, b, 1.0), Edge(b, a, 1.0)])
        assert g.get_number_of_edges() == 1

    def test_first_occurrence_wins(self):
        a, b = Vertex("A"), Vertex("B")
        first, second = Edge(a, b, 1.0), Edge(b, a, 9.0)
        g = Graph([first, second])
        assert g.edges == (first,)
        assert g.try_get_edge(a, b) is first
        assert g.try_get_edge(a, b).weight == 1.0

    def test_edges_keep_input_order(self, path_graph):
        _, (ab, bc), g = path_graph
        assert g.edges == (ab, bc)

    def test_vertices_in_first_seen_order(self, path_graph):
        (a, b, c), _, g = path_graph
        assert g.vertices == (a, b, c)

    def test_counts_and_repr(self, path_graph):
        _, _, g = path_graph
        assert g.get_number_of_vertices() == 3
        assert g.get_number_of_edges() == 2
        assert repr(g) == "Graph(vertices=3, edges=2)"

    def test_vertex_shared_by_two_graphs(self, path_graph):
        (a, b, _), _, g1 = path_graph
        g2 = Graph([Edge(b, a, 4.0)])
        assert a in g1 and a in g2
        assert g2.try_get_edge(a, b).weight == 4.0
        assert g1.try_get_edge(a, b).weight == 1.0


# ═════════════════════════════════════════════════════════════════
#  ADJACENCY
# ═════════════════════════════════════════════════════════════════

class TestAdjacency:

    def test_incident_edges(self, path_graph):
        (a, b, c), (ab, bc), g = path_graph
        assert set(g.incident_edges(a)) == {ab}
        assert set(g.incident_edges(b)) == {ab, bc}
        assert set(g.incident_edges(c)) == {bc}

    def test_incident_edges_unknown_vertex_raises(self, path_graph):
        _, _, g = path_graph
        with pytest.raises(VertexNotFoundError, match="not in graph"):
            g.incident_edges(Vertex("ghost"))

    def test_vertex_not_found_is_a_key_error(self, path_graph):
        _, _, g = path_graph
        with pytest.raises(KeyError):
            g.incident_edges(Vertex("ghost"))

    def test_index_matches_edge_set(self, grid_graph):
        """Every vertex maps to exactly the edges that contain it."""
        for vertex in grid_graph.vertices:
            expected = {e for e in grid_graph.edges if e.contains(vertex)}
            assert set(grid_graph.incident_edges(vertex)) == expected
            assert len(grid_graph.incident_edges(vertex)) == len(expected)

    def test_neighbors(self, path_graph):
        (a, b, c), _, g = path_graph
        assert set(g.neighbors(b)) == {a, c}
        assert g.neighbors(a) == [b]

    def test_self_loop_registered_once(self):
        a = Vertex("A")
        loop = Edge(a, a, 1.0)
        g = Graph([loop])
        assert g.incident_edges(a) == (loop,)
        assert g.neighbors(a) == [a]
        assert g.try_get_edge(a, a) is loop

    def test_contains(self, path_graph):
        (a, _, _), _, g = path_graph
        assert a in g
        assert g.contains_vertex(a)
        assert Vertex("ghost") not in g


# ═════════════════════════════════════════════════════════════════
#  PAIRWISE LOOKUP
# ═════════════════════════════════════════════════════════════════

class TestTryGetEdge:

    def test_connected_pair(self, path_graph):
        (a, b, _), (ab, _), g = path_graph
        assert g.try_get_edge(a, b) is ab

    def test_lookup_is_symmetric(self, path_graph):
        (a, b, _), _, g = path_graph
        assert g.try_get_edge(a, b) is g.try_get_edge(b, a)

    def test_disconnected_pair_returns_none(self, path_graph):
        (a, _, c), _, g = path_graph
        assert g.try_get_edge(a, c) is None
        assert g.try_get_edge(c, a) is None

    def test_unknown_second_vertex_returns_none(self, path_graph):
        (a, _, _), _, g = path_graph
        assert g.try_get_edge(a, Vertex("ghost")) is None

    def test_unknown_first_vertex_raises(self, path_graph):
        (a, _, _), _, g = path_graph
        with pytest.raises(VertexNotFoundError):
            g.try_get_edge(Vertex("ghost"), a)

    def test_symmetry_over_all_pairs(self, pentagram_graph):
        for v1, v2 in itertools.combinations(pentagram_graph.vertices, 2):
            assert pentagram_graph.try_get_edge(v1, v2) is pentagram_graph.try_get_edge(v2, v1)


# ═════════════════════════════════════════════════════════════════
#  ISOLATED VERTICES
# ═════════════════════════════════════════════════════════════════

class TestIsolatedVertices:

    def test_isolated_vertex_is_registered(self, with_isolated):
        (a, b, z), g = with_isolated
        assert g.vertices == (a, b, z)
        assert g.incident_edges(z) == ()
        assert g.neighbors(z) == []

    def test_isolated_vertex_has_no_edges(self, with_isolated):
        (a, _, z), g = with_isolated
        assert g.try_get_edge(z, a) is None

    def test_extra_vertex_already_in_edges_not_duplicated(self):
        a, b = Vertex("A"), Vertex("B")
        g = Graph([Edge(a, b, 1.0)], vertices=[a])
        assert g.vertices == (a, b)
        assert len(g.incident_edges(a)) == 1

    def test_vertices_only_graph(self):
        a, b = Vertex("A"), Vertex("B")
        g = Graph([], vertices=[a, b])
        assert len(g) == 2
        assert g.get_number_of_edges() == 0


# ═════════════════════════════════════════════════════════════════
#  EXAMPLE GRAPHS
# ═════════════════════════════════════════════════════════════════

class TestExampleGraphs:

    def test_grid_shape(self, grid_graph):
        assert grid_graph.get_number_of_vertices() == 25
        assert grid_graph.get_number_of_edges() == 40

    def test_grid_corner_and_center_degree(self, grid_graph):
        degrees = sorted(len(grid_graph.incident_edges(v)) for v in grid_graph.vertices)
        assert degrees.count(2) == 4
        assert degrees.count(4) == 9

    def test_pentagram_is_complete(self, pentagram_graph):
        assert pentagram_graph.get_number_of_vertices() == 5
        assert pentagram_graph.get_number_of_edges() == 10
        for v1, v2 in itertools.combinations(pentagram_graph.vertices, 2):
            assert pentagram_graph.try_get_edge(v1, v2) is not None
