"""
    Planner — force-directed layout of an undirected weighted graph.

    Every vertex starts at a uniformly random location in [0,1)×[0,1).
    Each iteration then, on a frozen snapshot of the locations:

        0. with the JITTER coincidence policy, moves vertices that share a
           location apart by ``jitter_distance``,
        1. sums the repulsion from all other vertices and the attraction
           of all incident edges into a net force per vertex,
        2. moves every vertex by its net force (unit-step Euler, no
           momentum, no damping),
        3. subtracts the centroid so the layout stays around the origin.

    The run ends after ``max_iterations`` iterations, or earlier if a
    ``convergence_threshold`` is configured and reached.
"""
import random
from typing import Optional, Tuple

from layout_api.geometry import Location, Vector
from layout_api.models.graph import Graph

from .base_planner import LayoutPlanner, Locations
from .config import CoincidencePolicy, PlannerConfig
from .forces import separate_coincident, total_attraction, total_repulsion


class Planner(LayoutPlanner):
    """
    Force-directed solver.

    The planner keeps no state between ``plan`` calls apart from its
    configuration and observers, so one instance can serve many graphs.
    """

    def __init__(self, config: Optional[PlannerConfig] = None):
        """
        Args:
            config: Force constants and stop rules (defaults if omitted).

        Raises:
            PlannerConfigError: If the configuration is invalid.
        """
        super().__init__()
        self._config: PlannerConfig = config or PlannerConfig()
        self._config.validate()

    @property
    def config(self) -> PlannerConfig:
        return self._config

    @config.setter
    def config(self, value: PlannerConfig) -> None:
        value.validate()
        self._config = value

    @property
    def iterations(self) -> int:
        return self._config.max_iterations

    # ── Template Method hooks (from LayoutPlanner) ───────────────

    def _initial_locations(self, graph: Graph, rng: random.Random) -> Locations:
        """Uniform random locations in the unit square, in vertex order."""
        return {vertex: Location(rng.random(), rng.random()) for vertex in graph.vertices}

    def _step(self, graph: Graph, locations: Locations,
              rng: random.Random) -> Tuple[Locations, float]:
        config = self._config
        new_locations: Locations = {}
        total_displacement = 0.0

        if config.coincidence_policy is CoincidencePolicy.JITTER:
            locations = separate_coincident(graph.vertices, locations, rng, config.jitter_distance)

        for vertex in graph.vertices:
            net_force = total_repulsion(graph, vertex, locations, config.repulsion_strength)
            net_force += total_attraction(graph, vertex, locations, config.attraction_strength)

            new_locations[vertex] = locations[vertex] + net_force
            total_displacement += net_force.squared_norm()

        return self._recenter(new_locations), total_displacement

    def _has_converged(self, total_displacement: float) -> bool:
        threshold = self._config.convergence_threshold
        return threshold is not None and total_displacement < threshold

    # ── Internal helpers ─────────────────────────────────────────

    @staticmethod
    def _recenter(locations: Locations) -> Locations:
        """Shift all locations so that their centroid is the origin."""
        total = Vector.ZERO
        for location in locations.values():
            total += location.to_vector()
        center = total * (1.0 / len(locations))
        return {vertex: location - center for vertex, location in locations.items()}

    def __repr__(self) -> str:
        return (
            f"Planner(iterations={self._config.max_iterations}, "
            f"repulsion={self._config.repulsion_strength:g}, "
            f"attraction={self._config.attraction_strength:g})"
        )
