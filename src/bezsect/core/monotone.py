"""Monotone curve wrapper and monotone-piece intersection.

A curve that is monotone in both x and y is contained in the rectangle
spanned by its endpoints, so its bounding box costs O(1) instead of an
extrema search. ``Monotone`` wraps any curve and relies on that fact; the
caller is responsible for only wrapping curves that really are monotone.
Wrapping a non-monotone curve silently yields wrong boxes and missed or
garbled intersections.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from bezsect.core.curve import MAX_EXTREMA, ParamRange
from bezsect.core.intersect import extend_deduplicated, find_intersections_bbox
from bezsect.core.segments import SEGMENT_TYPES, Line, PathSeg
from bezsect.core.transform import apply_translate_scale
from bezsect.domain import BoundedList, Point, Rect, TranslateScale
from bezsect.exceptions import InvalidAccuracyError

# Two monotone curves intersect at most three times.
MONOTONE_CAPACITY = 3

C = TypeVar("C")


@dataclass(frozen=True)
class Monotone(Generic[C]):
    """A curve known to be monotone in both dimensions.

    Forwards all curve operations to the wrapped curve, except extrema and
    bounding box computation, which use the endpoints only. Any curve-like
    value can be wrapped; the analytic line shortcut in ``intersect`` only
    applies to ``Monotone[PathSeg]``.

    Attributes:
        curve: The wrapped curve (any path segment or curve-like value)
    """

    curve: C

    def eval(self, t: float) -> Point:
        return self.curve.eval(t)  # type: ignore[attr-defined]

    def start(self) -> Point:
        return self.curve.start()  # type: ignore[attr-defined]

    def end(self) -> Point:
        return self.curve.end()  # type: ignore[attr-defined]

    def subsegment(self, param_range: ParamRange) -> "Monotone[C]":
        return Monotone(self.curve.subsegment(param_range))  # type: ignore[attr-defined]

    def subdivide(self) -> tuple["Monotone[C]", "Monotone[C]"]:
        a, b = self.curve.subdivide()  # type: ignore[attr-defined]
        return Monotone(a), Monotone(b)

    def reverse(self) -> "Monotone[C]":
        """Reverse the direction; a reversed monotone curve is still monotone."""
        return Monotone(self.curve.reverse())  # type: ignore[attr-defined]

    def extrema(self) -> BoundedList[float]:
        return BoundedList(MAX_EXTREMA)

    def extrema_ranges(self) -> BoundedList[ParamRange]:
        return BoundedList(MAX_EXTREMA + 1, [(0.0, 1.0)])

    def bounding_box(self) -> Rect:
        return Rect.from_points(self.start(), self.end())

    def solve_t_for_x(self, x: float) -> BoundedList[float]:
        return self.curve.solve_t_for_x(x)  # type: ignore[attr-defined]

    def solve_t_for_y(self, y: float) -> BoundedList[float]:
        return self.curve.solve_t_for_y(y)  # type: ignore[attr-defined]

    def solve_y_for_x(self, x: float) -> BoundedList[float]:
        return self.curve.solve_y_for_x(x)  # type: ignore[attr-defined]

    def solve_x_for_y(self, y: float) -> BoundedList[float]:
        return self.curve.solve_x_for_y(y)  # type: ignore[attr-defined]

    def apply_translate_scale(self, ts: TranslateScale) -> "Monotone[C]":
        """Transform the wrapped segment; uniform scaling keeps monotonicity."""
        return Monotone(apply_translate_scale(self.curve, ts))  # type: ignore[arg-type]

    def intersect(
        self,
        other: "Monotone[C]",
        accuracy: float,
        capacity: int = MONOTONE_CAPACITY,
    ) -> BoundedList[Point]:
        """Intersect two monotone curves.

        When both wrapped values are path segments and either is a straight
        line, the intersection is solved analytically against that line.
        Every other pairing, including wrappers around curves that are not
        path segments, falls back to the recursive bounding-box search.

        Args:
            other: Second monotone curve
            accuracy: Accuracy for the bounding-box fallback
            capacity: Maximum number of points to report

        Returns:
            Intersection points, in no particular order
        """
        result: BoundedList[Point] = BoundedList(capacity)
        if not self.bounding_box().overlaps(other.bounding_box()):
            return result

        if not (isinstance(self.curve, SEGMENT_TYPES) and isinstance(other.curve, SEGMENT_TYPES)):
            return find_intersections_bbox(self, other, accuracy, capacity)

        if isinstance(other.curve, Line):
            seg, line = self.curve, other.curve
        elif isinstance(self.curve, Line):
            seg, line = other.curve, self.curve
        else:
            return find_intersections_bbox(self, other, accuracy, capacity)

        hits = seg.intersect_line(line)  # type: ignore[attr-defined]
        result.extend(line.eval(hit.line_t) for hit in hits)
        return result


def split_monotone(seg: PathSeg) -> list[Monotone[PathSeg]]:
    """Cut a segment at its extrema into monotone pieces.

    Args:
        seg: Any path segment

    Returns:
        Monotone pieces in parameter order. A segment without interior
        extrema is wrapped as is.
    """
    ranges = seg.extrema_ranges()
    if len(ranges) == 1:
        return [Monotone(seg)]
    return [Monotone(seg.subsegment(r)) for r in ranges]


def intersect_split_monotone(
    a: PathSeg, b: PathSeg, accuracy: float, capacity: int
) -> BoundedList[Point]:
    """Intersect two arbitrary segments through their monotone pieces.

    Each pair of pieces is intersected with ``Monotone.intersect``. Hits
    near a piece boundary can be found by both neighbouring pieces, so
    results are merged with the same duplicate radius as the recursive
    search.

    Args:
        a: First segment
        b: Second segment
        accuracy: Accuracy for the bounding-box fallback
        capacity: Maximum number of points to report

    Returns:
        Intersection points ordered by piece pair

    Raises:
        InvalidAccuracyError: If accuracy is not a positive number
            (checked in every build rather than asserted)
    """
    if not accuracy > 0.0:
        raise InvalidAccuracyError(accuracy)

    result: BoundedList[Point] = BoundedList(capacity)
    double = 2.0 * accuracy
    pieces_b = split_monotone(b)
    for piece_a in split_monotone(a):
        for piece_b in pieces_b:
            if result.is_full():
                return result
            extend_deduplicated(result, piece_a.intersect(piece_b, accuracy, capacity), double)
    return result
