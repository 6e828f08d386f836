"""
    Edge model - unordered, weighted connection between two vertices.
"""
import math
import numbers
from typing import Tuple

from .vertex import Vertex


class Edge:
    """
        Class for an undirected edge between two vertices.
        The weight is the desired distance between the endpoints in the layout.
    """

    __slots__ = ('_left', '_right', '_weight')

    def __init__(self, left: Vertex, right: Vertex, weight: float):
        """
        Initialize an edge.

        Args:
            left:   One endpoint
            right:  The other endpoint (may be ``left`` for a self-loop)
            weight: Desired layout distance, finite and non-negative

        Raises:
            ValueError: If an endpoint is not a Vertex or the weight is invalid.
        """
        if not isinstance(left, Vertex):
            raise ValueError(f"Left endpoint must be a Vertex, got {type(left).__name__}")
        if not isinstance(right, Vertex):
            raise ValueError(f"Right endpoint must be a Vertex, got {type(right).__name__}")

        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise ValueError(f"Edge weight must be a number, got {type(weight).__name__}")

        weight = float(weight)
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"Edge weight must be a finite non-negative number, got {weight}")

        self._left = left
        self._right = right
        self._weight = weight

    @property
    def left(self) -> Vertex:
        return self._left

    @property
    def right(self) -> Vertex:
        return self._right

    @property
    def weight(self) -> float:
        return self._weight

    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return self._left, self._right

    def contains(self, vertex: Vertex) -> bool:
        """Check if the vertex is one of the endpoints"""
        return self._left == vertex or self._right == vertex

    def other(self, vertex: Vertex) -> Vertex:
        """
        Get the opposite end of the edge.

        Raises:
            ValueError: If the vertex is not an endpoint.
        """
        if self._left == vertex:
            return self._right
        if self._right == vertex:
            return self._left
        raise ValueError(f"{vertex!r} is not an endpoint of {self!r}")

    def connects(self, first: Vertex, second: Vertex) -> bool:
        """Check if the edge connects the two vertices, in either order"""
        return (self._left == first and self._right == second) or \
               (self._left == second and self._right == first)

    def is_self_loop(self) -> bool:
        return self._left == self._right

    def __eq__(self, other) -> bool:
        """
        Two edges are equal if they join the same pair of vertices, in any
        order; the weight is ignored. An edge equals a vertex exactly when
        that vertex is one of its endpoints.

        The edge-vertex equality is not reflected in the hash: an edge and
        its endpoint compare equal but hash differently. Do not mix edges
        and vertices as keys of one set or dict.
        """
        if isinstance(other, Edge):
            return self.connects(other._left, other._right)
        if isinstance(other, Vertex):
            return self.contains(other)
        return NotImplemented

    def __hash__(self) -> int:
        """Hash edge by its unordered endpoint pair"""
        return hash(frozenset((self._left, self._right)))

    def __repr__(self) -> str:
        return f"Edge({self._left!r} -- {self._right!r}, weight={self._weight:g})"
