"""
    Force functions of the force-directed layout.

    • Repulsion  – inverse-square push between every pair of vertices
                   (Coulomb's law with equal unit charges).
    • Attraction – one-sided spring along an edge; it only pulls, and only
                   once the endpoints are farther apart than the edge weight
                   (Hooke's law on the excess length).
    • Tie break  – moves vertices that share a location apart before the
                   forces are computed (``CoincidencePolicy.JITTER``).

    All functions read a frozen location snapshot; none of them mutates it.
"""
import logging
import math
import random
from typing import Dict, Iterable, Mapping

from layout_api.geometry import Location, Vector
from layout_api.models.graph import Graph
from layout_api.models.vertex import Vertex

logger = logging.getLogger(__name__)


def _random_direction(rng: random.Random) -> Vector:
    angle = rng.uniform(0.0, 2.0 * math.pi)
    return Vector(math.cos(angle), math.sin(angle))


def repulsion_force(of: Location, from_: Location, strength: float) -> Vector:
    """
    Force pushing ``of`` away from ``from_``.

    Magnitude is ``strength / d²``. Coincident locations exert no force on
    each other; ``separate_coincident`` is the way to pull such a pair apart.
    """
    offset = of - from_
    if offset.squared_norm() == 0.0:
        logger.debug("Coincident vertices at %r, skipping repulsion", of)
        return Vector.ZERO

    direction, distance = offset.normalized()
    return direction * (strength / (distance * distance))


def separate_coincident(
    vertices: Iterable[Vertex],
    locations: Mapping[Vertex, Location],
    rng: random.Random,
    distance: float,
) -> Dict[Vertex, Location]:
    """
    Break ties between vertices that share a location.

    The first vertex found at a location keeps it; every later one is moved
    by exactly ``distance`` in a direction drawn from ``rng``. Locations
    without a tie are copied unchanged and no random numbers are drawn for
    them.

    Returns:
        A new dict; ``locations`` is left untouched.
    """
    occupied: Dict[Location, Vertex] = {}
    separated: Dict[Vertex, Location] = {}
    for vertex in vertices:
        location = locations[vertex]
        if location in occupied:
            moved = location + _random_direction(rng) * distance
            logger.warning("Coincident vertices %r and %r at %r, moving the latter to %r",
                           occupied[location], vertex, location, moved)
            location = moved
        occupied.setdefault(location, vertex)
        separated[vertex] = location
    return separated


def attraction_force(
    of: Location,
    to: Location,
    desired_distance: float,
    strength: float,
) -> Vector:
    """
    Spring force pulling ``of`` towards ``to``.

    Zero while the distance does not exceed ``desired_distance``; otherwise
    ``strength * (d - desired_distance)`` directed at ``to``.
    """
    offset = to - of
    distance = offset.norm()
    if distance <= desired_distance:
        return Vector.ZERO

    direction, _ = offset.normalized()
    return direction * (strength * (distance - desired_distance))


def total_repulsion(
    graph: Graph,
    vertex: Vertex,
    locations: Mapping[Vertex, Location],
    strength: float,
) -> Vector:
    """Sum of the repulsion from every other vertex, connected or not."""
    location = locations[vertex]
    force = Vector.ZERO
    for other in graph.vertices:
        if other == vertex:
            continue
        force += repulsion_force(location, locations[other], strength)
    return force


def total_attraction(
    graph: Graph,
    vertex: Vertex,
    locations: Mapping[Vertex, Location],
    strength: float,
) -> Vector:
    """Sum of the spring forces of all edges incident to the vertex."""
    location = locations[vertex]
    force = Vector.ZERO
    for edge in graph.incident_edges(vertex):
        other = edge.other(vertex)
        force += attraction_force(location, locations[other], edge.weight, strength)
    return force
