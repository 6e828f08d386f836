"""
    Geometry value types - 2D displacement (Vector) and position (Location).

    Both types are immutable. Subtracting two locations yields a vector,
    adding a vector to a location yields a location.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

from .exceptions import ZeroLengthVectorError


@dataclass(frozen=True)
class Vector:
    """Displacement in the plane."""
    x: float
    y: float

    ZERO: ClassVar['Vector']

    def squared_norm(self) -> float:
        return self.x * self.x + self.y * self.y

    def norm(self) -> float:
        return math.sqrt(self.squared_norm())

    def normalized(self) -> Tuple['Vector', float]:
        """
        Return the unit vector in the same direction, plus the original norm.

        Raises:
            ZeroLengthVectorError: If the vector has zero length.
        """
        norm = self.norm()
        if norm == 0.0:
            raise ZeroLengthVectorError("Cannot normalize a zero-length vector")
        inverse_norm = 1.0 / norm
        return Vector(self.x * inverse_norm, self.y * inverse_norm), norm

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __add__(self, other: 'Vector') -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector') -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Vector':
        return Vector(-self.x, -self.y)

    def __mul__(self, scalar: float) -> 'Vector':
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Vector({self.x:.6g}, {self.y:.6g})"


Vector.ZERO = Vector(0.0, 0.0)


@dataclass(frozen=True)
class Location:
    """Absolute position in the plane."""
    x: float
    y: float

    ORIGIN: ClassVar['Location']

    def to_vector(self) -> Vector:
        """Position vector of this location relative to the origin."""
        return Vector(self.x, self.y)

    def distance_to(self, other: 'Location') -> float:
        return (self - other).norm()

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __add__(self, vector: Vector) -> 'Location':
        if not isinstance(vector, Vector):
            return NotImplemented
        return Location(self.x + vector.x, self.y + vector.y)

    def __sub__(self, other):
        # Location - Location -> Vector, Location - Vector -> Location
        if isinstance(other, Location):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Location(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Location({self.x:.6g}, {self.y:.6g})"


Location.ORIGIN = Location(0.0, 0.0)
