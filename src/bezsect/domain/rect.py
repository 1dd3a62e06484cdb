"""Axis-aligned rectangles derived from curve geometry."""

from dataclasses import dataclass

from bezsect.domain.point import Point


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned box.

    Rects are always derived from a curve (its bounding box) and never
    stored independently of one.

    Attributes:
        x0: Minimum x
        y0: Minimum y
        x1: Maximum x
        y1: Maximum y
    """

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_points(cls, p0: Point, p1: Point) -> "Rect":
        """Create the smallest rect containing two points.

        Args:
            p0: First corner
            p1: Opposite corner

        Returns:
            Rect with normalized bounds
        """
        return cls(min(p0.x, p1.x), min(p0.y, p1.y), max(p0.x, p1.x), max(p0.y, p1.y))

    def union_pt(self, point: Point) -> "Rect":
        """Grow the rect so that it contains ``point``."""
        return Rect(
            min(self.x0, point.x),
            min(self.y0, point.y),
            max(self.x1, point.x),
            max(self.y1, point.y),
        )

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def center(self) -> Point:
        """Return the center point of the rect."""
        return Point((self.x0 + self.x1) / 2, (self.y0 + self.y1) / 2)

    def overlaps(self, other: "Rect") -> bool:
        """Check for strict overlap with another rect.

        Rects that merely touch along an edge or at a corner do not overlap.

        Args:
            other: Rect to test against

        Returns:
            True if the interiors of both rects intersect
        """
        return (
            self.x1 > other.x0
            and other.x1 > self.x0
            and self.y1 > other.y0
            and other.y1 > self.y0
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.x0, self.y0, self.x1, self.y1)
