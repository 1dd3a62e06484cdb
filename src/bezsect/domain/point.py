"""Core point type for curve geometry.

This module defines the fundamental 2D value used throughout bezsect:
- Point: A point in document coordinates
- approx_eq: Tolerance-based float comparison that never matches NaN
"""

import math
from dataclasses import dataclass
from typing import Any


def approx_eq(a: float, b: float, tolerance: float) -> bool:
    """Check whether two floats differ by at most ``tolerance``.

    NaN is never approximately equal to anything, including itself, because
    every comparison involving NaN is false.

    Args:
        a: First value
        b: Second value
        tolerance: Maximum allowed absolute difference

    Returns:
        True if the values are within tolerance of each other
    """
    return abs(a - b) <= tolerance


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Geometric results are compared with
    ``approx_eq`` rather than ``==``.

    Attributes:
        x: X coordinate in document units
        y: Y coordinate in document units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards ``other``.

        Args:
            other: Target point (reached at t=1)
            t: Interpolation parameter

        Returns:
            Interpolated point
        """
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def midpoint(self, other: "Point") -> "Point":
        """Return the point halfway between this point and ``other``."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def distance(self, other: "Point") -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def approx_eq(self, other: "Point", tolerance: float) -> bool:
        """Check per-axis approximate equality.

        Args:
            other: Point to compare with
            tolerance: Maximum allowed difference on each axis

        Returns:
            True if both coordinates are within tolerance
        """
        return approx_eq(self.x, other.x, tolerance) and approx_eq(self.y, other.y, tolerance)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])
