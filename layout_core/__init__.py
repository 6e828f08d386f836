"""
Force Layout — core package.

Public API:
    Planner            – force-directed layout solver
    LayoutPlanner      – generic Template Method base for planners
    PlannerConfig      – force constants and stop rules
    CoincidencePolicy  – handling of coincident vertices
"""
from .base_planner import (
    LayoutPlanner,
    EVENT_LAYOUT_STARTED,
    EVENT_ITERATION_COMPLETED,
    EVENT_LAYOUT_FINISHED,
)
from .config import PlannerConfig, CoincidencePolicy
from .planner import Planner

__all__ = [
    'Planner',
    'LayoutPlanner',
    'PlannerConfig',
    'CoincidencePolicy',
    'EVENT_LAYOUT_STARTED',
    'EVENT_ITERATION_COMPLETED',
    'EVENT_LAYOUT_FINISHED',
]
