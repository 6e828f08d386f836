# tests/conftest.py
"""
Shared test fixtures.
Example graphs used to seed layout runs: a 5x5 grid, a pentagram, a square
(4-cycle), a single weighted pair and a graph with an isolated vertex.
"""
import pytest

from layout_api.models.vertex import Vertex, DataVertex
from layout_api.models.edge import Edge
from layout_api.models.graph import Graph


def build_grid(rows: int = 5, columns: int = 5) -> Graph:
    """
    Grid of DataVertex("row,column"); neighbours are linked horizontally and
    vertically with weight 1.5 * (row + column).
    """
    grid = [[DataVertex(f"{row},{column}") for column in range(columns)]
            for row in range(rows)]
    edges = []

    for row in range(rows):
        for column in range(columns - 1):
            edges.append(Edge(grid[row][column], grid[row][column + 1], 1.5 * (row + column)))

    for row in range(rows - 1):
        for column in range(columns):
            edges.append(Edge(grid[row][column], grid[row + 1][column], 1.5 * (row + column)))

    return Graph(edges)


def build_pentagram() -> Graph:
    """
            A
          B   C
           D E
    """
    a, b, c, d, e = (DataVertex(name) for name in "abcde")
    return Graph([
        # inner connections
        Edge(b, c, 2.0),
        Edge(c, d, 2.0),
        Edge(d, a, 2.0),
        Edge(a, e, 2.0),
        Edge(e, b, 2.0),
        # outer connections
        Edge(a, c, 1.0),
        Edge(c, e, 1.0),
        Edge(e, d, 1.0),
        Edge(d, b, 1.0),
        Edge(b, a, 1.0),
    ])


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def grid_graph() -> Graph:
    """5x5 grid: 25 vertices, 40 edges."""
    return build_grid()


@pytest.fixture
def pentagram_graph() -> Graph:
    """5 vertices, 10 edges."""
    return build_pentagram()


@pytest.fixture
def pair():
    """Two vertices joined by an edge of weight 5."""
    a, b = Vertex("A"), Vertex("B")
    return a, b, Graph([Edge(a, b, 5.0)])


@pytest.fixture
def square():
    """
    A — B
    |   |
    C — D      every edge has weight 1
    """
    a, b, c, d = Vertex("A"), Vertex("B"), Vertex("C"), Vertex("D")
    graph = Graph([Edge(a, b, 1.0), Edge(a, c, 1.0), Edge(c, d, 1.0), Edge(b, d, 1.0)])
    return (a, b, c, d), graph


@pytest.fixture
def with_isolated():
    """Pair A—B plus an isolated vertex Z."""
    a, b, z = Vertex("A"), Vertex("B"), Vertex("Z")
    return (a, b, z), Graph([Edge(a, b, 1.0)], vertices=[z])
