"""
    Planner configuration — force constants, iteration budget, stop rules.

    Provides a typed configuration object that controls the force-directed
    solver. Defaults reproduce the classic fixed-budget behaviour: 1000
    iterations, no early exit.
"""
import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from layout_api.exceptions import PlannerConfigError


class CoincidencePolicy(Enum):
    """What to do when two vertices occupy exactly the same location"""
    SKIP = "skip"
    JITTER = "jitter"


@dataclass
class PlannerConfig:
    """
    Configuration for the force-directed Planner.

    Attributes:
        repulsion_strength:     Inverse-square constant between every pair
                                of vertices.
        attraction_strength:    Spring constant of an edge stretched beyond
                                its desired distance.
        max_iterations:         Fixed iteration budget.
        convergence_threshold:  If set, stop as soon as the sum of squared
                                net forces of one iteration falls below it.
                                ``None`` means "always run the full budget".
        coincidence_policy:     Handling of vertices that share a location
                                (``SKIP`` ignores the pair's repulsion,
                                ``JITTER`` moves all but one of them by
                                ``jitter_distance`` in a random direction).
        jitter_distance:        How far a coincident vertex is moved to
                                break the tie. The default matches the
                                size of the initial unit square.
    """
    repulsion_strength: float = 1.0
    attraction_strength: float = 0.1
    max_iterations: int = 1000
    convergence_threshold: Optional[float] = None
    coincidence_policy: CoincidencePolicy = CoincidencePolicy.SKIP
    jitter_distance: float = 1.0

    def validate(self) -> None:
        """
        Check value types and ranges.

        Raises:
            PlannerConfigError: If any value is out of range or not a number.
        """
        for name in ('repulsion_strength', 'attraction_strength'):
            value = getattr(self, name)
            if not _is_real(value) or not math.isfinite(value) or value < 0:
                raise PlannerConfigError(f"{name} must be a finite non-negative number, got {value!r}")

        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int) \
                or self.max_iterations <= 0:
            raise PlannerConfigError(f"max_iterations must be a positive integer, got {self.max_iterations!r}")

        threshold = self.convergence_threshold
        if threshold is not None and (not _is_real(threshold) or not math.isfinite(threshold) or threshold < 0):
            raise PlannerConfigError(
                f"convergence_threshold must be a finite non-negative number, got {threshold!r}"
            )

        if not isinstance(self.coincidence_policy, CoincidencePolicy):
            raise PlannerConfigError(f"Unknown coincidence policy: {self.coincidence_policy!r}")

        if not _is_real(self.jitter_distance) or not math.isfinite(self.jitter_distance) \
                or self.jitter_distance <= 0:
            raise PlannerConfigError(
                f"jitter_distance must be a finite positive number, got {self.jitter_distance!r}"
            )


def _is_real(value) -> bool:
    """True for int and float values (and their numeric kin), never for bool"""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
