"""
Graph data model — vertices, edges and the immutable graph.
"""
from .vertex import Vertex, DataVertex
from .edge import Edge
from .graph import Graph

__all__ = ['Vertex', 'DataVertex', 'Edge', 'Graph']
