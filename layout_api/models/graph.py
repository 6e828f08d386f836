"""
    Graph model - immutable undirected, weighted graph.
    Built once from a sequence of edges; duplicate edges are dropped.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import VertexNotFoundError
from .vertex import Vertex
from .edge import Edge

logger = logging.getLogger(__name__)


class Graph:
    """
        Class for graph representation.

        Holds the deduplicated edge set and an index from every vertex to
        the edges incident to it. There is no mutation API; a graph can be
        shared freely between layout runs.
    """

    def __init__(self, edges: Iterable[Edge], vertices: Iterable[Vertex] = ()):
        """
        Initialize a graph.

        The first occurrence of an edge wins: a later edge joining the same
        pair of vertices is skipped, whatever its weight.

        Args:
            edges:    Edges of the graph
            vertices: Additional vertices, typically isolated ones

        Raises:
            ValueError: If ``edges`` or ``vertices`` is None, or an item is
                        of the wrong type.
        """
        if edges is None:
            raise ValueError("Graph requires an edge sequence, got None")
        if vertices is None:
            raise ValueError("Graph vertices must be an iterable, got None")

        retained: Dict[Edge, Edge] = {}
        adjacency: Dict[Vertex, List[Edge]] = {}  # vertex -> [Edges], insertion ordered

        for edge in edges:
            if not isinstance(edge, Edge):
                raise ValueError(f"Expected an Edge, got {type(edge).__name__}")

            if edge in retained:
                logger.debug("Skipping duplicate %r (kept %r)", edge, retained[edge])
                continue

            retained[edge] = edge
            adjacency.setdefault(edge.left, []).append(edge)
            if not edge.is_self_loop():
                adjacency.setdefault(edge.right, []).append(edge)

        for vertex in vertices:
            if not isinstance(vertex, Vertex):
                raise ValueError(f"Expected a Vertex, got {type(vertex).__name__}")
            adjacency.setdefault(vertex, [])

        self._edges: Tuple[Edge, ...] = tuple(retained)
        self._adjacency: Dict[Vertex, Tuple[Edge, ...]] = {
            vertex: tuple(incident) for vertex, incident in adjacency.items()
        }

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """All retained edges, in input order."""
        return self._edges

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """All vertices, in the order they were first seen."""
        return tuple(self._adjacency)

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adjacency

    def incident_edges(self, vertex: Vertex) -> Tuple[Edge, ...]:
        """
        Get all edges touching the vertex, each exactly once.

        Raises:
            VertexNotFoundError: If the vertex is not part of the graph.
        """
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise VertexNotFoundError(f"Vertex {vertex!r} not in graph") from None

    def try_get_edge(self, first: Vertex, second: Vertex) -> Optional[Edge]:
        """
        Get the edge connecting two vertices.

        Returns:
            The connecting edge, or None if the vertices are not adjacent.

        Raises:
            VertexNotFoundError: If ``first`` is not part of the graph.
        """
        for edge in self.incident_edges(first):
            if edge.connects(first, second):
                return edge
        return None

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        """Get all vertices adjacent to the vertex (itself for a self-loop)"""
        return [edge.other(vertex) for edge in self.incident_edges(vertex)]

    def get_number_of_vertices(self) -> int:
        return len(self._adjacency)

    def get_number_of_edges(self) -> int:
        return len(self._edges)

    def __contains__(self, vertex) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._adjacency)}, edges={len(self._edges)})"
