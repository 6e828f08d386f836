"""
Force Layout API — geometry value types, graph model and exceptions.
"""
from .geometry import Vector, Location
from .models.vertex import Vertex, DataVertex
from .models.edge import Edge
from .models.graph import Graph
from .exceptions import (
    LayoutError,
    VertexNotFoundError,
    ZeroLengthVectorError,
    PlannerConfigError,
    LayoutCancelledError,
)

__all__ = [
    'Vector',
    'Location',
    'Vertex',
    'DataVertex',
    'Edge',
    'Graph',
    'LayoutError',
    'VertexNotFoundError',
    'ZeroLengthVectorError',
    'PlannerConfigError',
    'LayoutCancelledError',
]
