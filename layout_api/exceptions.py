# layout_api/exceptions.py

class LayoutError(Exception):
    """Base class for all layout errors."""
    pass

class VertexNotFoundError(LayoutError, KeyError):
    """Raised when a vertex is not part of the graph."""
    pass

class ZeroLengthVectorError(LayoutError, ArithmeticError):
    """Raised when a zero-length vector is normalized."""
    pass

class PlannerConfigError(LayoutError, ValueError):
    """Raised when planner configuration values are out of range."""
    pass

class LayoutCancelledError(LayoutError):
    """
    Raised when a running layout is cancelled by the caller.

    Carries the index of the iteration that was about to start and the
    locations committed by the last completed iteration.
    """

    def __init__(self, iteration: int, locations: dict):
        super().__init__(f"Layout cancelled before iteration {iteration}")
        self.iteration = iteration
        self.locations = locations
