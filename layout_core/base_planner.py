"""
    Generic base for iterative layout planners.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of a layout run (validate → initial locations →
    iterate steps → return), letting concrete planners override the
    individual steps.

    Observer (hooks)
    ────────────────
    ``_listeners`` dict for incremental consumers (e.g. a renderer that
    redraws after every iteration):
        • layout_started       – graph, iterations
        • iteration_completed  – iteration, locations, total_displacement
        • layout_finished      – iterations, locations, converged
"""
import logging
import random
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Optional, Tuple

from layout_api.exceptions import LayoutCancelledError
from layout_api.geometry import Location
from layout_api.models.graph import Graph
from layout_api.models.vertex import Vertex

logger = logging.getLogger(__name__)

Locations = Dict[Vertex, Location]

# ── Observer event types ─────────────────────────────────────────
EVENT_LAYOUT_STARTED = "layout_started"
EVENT_ITERATION_COMPLETED = "iteration_completed"
EVENT_LAYOUT_FINISHED = "layout_finished"


class LayoutPlanner(ABC):
    """
    Abstract base for planners that map a Graph to vertex locations.

    Concrete subclasses must implement:
        - _initial_locations(graph, rng)          → starting locations
        - _step(graph, locations, rng)            → (new locations, displacement)
        - iterations                              → iteration budget

    and may override:
        - _has_converged(total_displacement)      → early-exit test
    """

    def __init__(self):
        # Observer listeners: event_name → [callback, ...]
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

    @property
    @abstractmethod
    def iterations(self) -> int:
        """Maximum number of iterations of one layout run."""
        ...

    # ── Template Method ──────────────────────────────────────────

    def plan(
        self,
        graph: Graph,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        cancel_event=None,
    ) -> Locations:
        """
        Lay out the graph.

        Args:
            graph:        The graph to lay out.
            rng:          Random source for the initial locations. Mutually
                          exclusive with ``seed``.
            seed:         Seed for a fresh ``random.Random``. Without ``rng``
                          and ``seed`` the source is seeded from the OS.
            cancel_event: Optional object with an ``is_set()`` method, such
                          as ``threading.Event``; checked before every
                          iteration.

        Returns:
            A new dict with one location per vertex of the graph.

        Raises:
            ValueError:           If the graph is None, or both ``rng`` and
                                  ``seed`` are given.
            LayoutCancelledError: If ``cancel_event`` was set.
        """
        if graph is None:
            raise ValueError("Cannot plan a layout for graph None")
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        if rng is None:
            rng = random.Random(seed)

        if len(graph) == 0:
            logger.info("Empty graph, nothing to lay out.")
            return {}

        logger.info("Layout started: %d vertices, %d edges, %d iterations",
                    graph.get_number_of_vertices(), graph.get_number_of_edges(),
                    self.iterations)
        self._notify(EVENT_LAYOUT_STARTED, graph=graph, iterations=self.iterations)

        locations = self._initial_locations(graph, rng)
        converged = False
        completed = 0

        for iteration in range(self.iterations):
            if cancel_event is not None and cancel_event.is_set():
                logger.info("Layout cancelled before iteration %d", iteration)
                raise LayoutCancelledError(iteration, dict(locations))

            locations, total_displacement = self._step(graph, locations, rng)
            completed = iteration + 1

            logger.debug("Iteration %d: total displacement %.6g",
                         iteration, total_displacement)
            self._notify(EVENT_ITERATION_COMPLETED,
                         iteration=iteration,
                         locations=MappingProxyType(locations),
                         total_displacement=total_displacement)

            if self._has_converged(total_displacement):
                converged = True
                logger.info("Layout converged after %d iterations "
                            "(total displacement %.6g)", completed, total_displacement)
                break

        logger.info("Layout finished after %d iterations.", completed)
        self._notify(EVENT_LAYOUT_FINISHED,
                     iterations=completed,
                     locations=MappingProxyType(locations),
                     converged=converged)
        return dict(locations)

    @abstractmethod
    def _initial_locations(self, graph: Graph, rng: random.Random) -> Locations:
        """Return the starting location of every vertex."""
        ...

    @abstractmethod
    def _step(self, graph: Graph, locations: Locations,
              rng: random.Random) -> Tuple[Locations, float]:
        """
        Perform one iteration on a frozen snapshot.

        Must not modify ``locations``; returns the new locations and the
        total displacement of the iteration.
        """
        ...

    def _has_converged(self, total_displacement: float) -> bool:
        """Early-exit test; the default never stops early."""
        return False

    # ── Observer pattern ─────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register a callback for a planner event.

        Events:
            - layout_started
            - iteration_completed
            - layout_finished
        """
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """Remove a previously registered callback."""
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _notify(self, event: str, **kwargs: Any) -> None:
        """Fire all callbacks registered for the given event."""
        for cb in self._listeners.get(event, []):
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error("Observer callback failed for '%s': %s", event, exc)
