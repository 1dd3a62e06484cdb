"""Path segment types: lines, quadratic and cubic Bézier curves.

The three variants form a closed set (``PathSeg``). Each one offers the same
operations: evaluation, exact endpoints, subdivision, subsegments,
extrema and bounding boxes, coordinate solving, and intersection with a
straight line. All of them are immutable values.
"""

from dataclasses import dataclass
from typing import Any

from bezsect.core.curve import (
    MAX_EXTREMA,
    ParamRange,
    bounding_box_from_extrema,
    extrema_ranges_from,
)
from bezsect.core.roots import solve_cubic, solve_quadratic
from bezsect.core.solve import (
    cubic_coefficients,
    quad_coefficients,
    solve_cubic_t_for_v,
    solve_line_t_for_v,
    solve_quad_t_for_v,
)
from bezsect.domain import BoundedList, Point, Rect
from bezsect.exceptions import UnsupportedSegmentError

# A line crosses a cubic at most three times.
MAX_LINE_INTERSECTIONS = 3

LINE_INTERSECTION_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class LineIntersection:
    """A hit between a path segment and a probe line.

    Attributes:
        line_t: Parameter on the probe line, in [0, 1]
        segment_t: Parameter on the intersected segment
    """

    line_t: float
    segment_t: float


class _SegmentOps:
    """Operations shared by all segment variants."""

    __slots__ = ()

    def extrema_ranges(self) -> BoundedList[ParamRange]:
        return extrema_ranges_from(self.extrema())  # type: ignore[attr-defined]

    def bounding_box(self) -> Rect:
        """Smallest axis-aligned rect containing the whole curve."""
        return bounding_box_from_extrema(self)  # type: ignore[arg-type]

    def solve_y_for_x(self, x: float) -> BoundedList[float]:
        """Find the ``y`` values where the curve reaches ``x``."""
        ts = self.solve_t_for_x(x)  # type: ignore[attr-defined]
        return BoundedList(ts.capacity, (self.eval(t).y for t in ts))  # type: ignore[attr-defined]

    def solve_x_for_y(self, y: float) -> BoundedList[float]:
        """Find the ``x`` values where the curve reaches ``y``."""
        ts = self.solve_t_for_y(y)  # type: ignore[attr-defined]
        return BoundedList(ts.capacity, (self.eval(t).x for t in ts))  # type: ignore[attr-defined]


def _curve_line_hits(
    roots: BoundedList[float],
    px: tuple[float, ...],
    py: tuple[float, ...],
    line: "Line",
) -> BoundedList[LineIntersection]:
    # Map curve parameters to points, then project onto the probe line.
    result: BoundedList[LineIntersection] = BoundedList(MAX_LINE_INTERSECTIONS)
    dx = line.p1.x - line.p0.x
    dy = line.p1.y - line.p0.y
    inv_len2 = 1.0 / (dx * dx + dy * dy)
    for t in roots:
        if not -LINE_INTERSECTION_EPSILON <= t <= 1.0 + LINE_INTERSECTION_EPSILON:
            continue
        x = sum(c * t**i for i, c in enumerate(px))
        y = sum(c * t**i for i, c in enumerate(py))
        u = ((x - line.p0.x) * dx + (y - line.p0.y) * dy) * inv_len2
        if 0.0 <= u <= 1.0:
            result.push(LineIntersection(line_t=u, segment_t=t))
    return result


def _implicit_line_coefficients(
    px: tuple[float, ...], py: tuple[float, ...], line: "Line"
) -> list[float]:
    # Substitute the curve's power basis into dy*(x - x0) - dx*(y - y0) = 0.
    dx = line.p1.x - line.p0.x
    dy = line.p1.y - line.p0.y
    coefs = [dy * cx - dx * cy for cx, cy in zip(px, py)]
    coefs[0] = dy * (px[0] - line.p0.x) - dx * (py[0] - line.p0.y)
    return coefs


def _is_degenerate(line: "Line") -> bool:
    return line.p0.x == line.p1.x and line.p0.y == line.p1.y


@dataclass(frozen=True, slots=True)
class Line(_SegmentOps):
    """A straight line segment.

    Attributes:
        p0: Start point
        p1: End point
    """

    p0: Point
    p1: Point

    kind = "line"

    def control_points(self) -> tuple[Point, Point]:
        return (self.p0, self.p1)

    def eval(self, t: float) -> Point:
        return self.p0.lerp(self.p1, t)

    def start(self) -> Point:
        return self.p0

    def end(self) -> Point:
        return self.p1

    def subsegment(self, param_range: ParamRange) -> "Line":
        t0, t1 = param_range
        return Line(self.eval(t0), self.eval(t1))

    def subdivide(self) -> tuple["Line", "Line"]:
        mid = self.p0.midpoint(self.p1)
        return Line(self.p0, mid), Line(mid, self.p1)

    def reverse(self) -> "Line":
        return Line(self.p1, self.p0)

    def extrema(self) -> BoundedList[float]:
        return BoundedList(MAX_EXTREMA)

    def solve_t_for_x(self, x: float) -> BoundedList[float]:
        return solve_line_t_for_v(self.p0.x, self.p1.x, x)

    def solve_t_for_y(self, y: float) -> BoundedList[float]:
        return solve_line_t_for_v(self.p0.y, self.p1.y, y)

    def intersect_line(self, line: "Line") -> BoundedList[LineIntersection]:
        """Intersect with a probe line using the 2x2 determinant.

        Args:
            line: Probe line; hits outside its extent are dropped

        Returns:
            At most one hit. Parallel and nearly parallel lines give none.
        """
        result: BoundedList[LineIntersection] = BoundedList(MAX_LINE_INTERSECTIONS)
        dx = line.p1.x - line.p0.x
        dy = line.p1.y - line.p0.y
        sx = self.p1.x - self.p0.x
        sy = self.p1.y - self.p0.y

        det = dx * sy - dy * sx
        if abs(det) < LINE_INTERSECTION_EPSILON:
            return result

        t = (dx * (line.p0.y - self.p0.y) - dy * (line.p0.x - self.p0.x)) / det
        if -LINE_INTERSECTION_EPSILON <= t <= 1.0 + LINE_INTERSECTION_EPSILON:
            u = ((self.p0.x - line.p0.x) * sy - (self.p0.y - line.p0.y) * sx) / det
            if 0.0 <= u <= 1.0:
                result.push(LineIntersection(line_t=u, segment_t=t))
        return result


@dataclass(frozen=True, slots=True)
class QuadBez(_SegmentOps):
    """A quadratic Bézier curve.

    Attributes:
        p0: Start point
        p1: Control point
        p2: End point
    """

    p0: Point
    p1: Point
    p2: Point

    kind = "quad"

    def control_points(self) -> tuple[Point, Point, Point]:
        return (self.p0, self.p1, self.p2)

    def eval(self, t: float) -> Point:
        mt = 1.0 - t
        return Point(
            self.p0.x * (mt * mt) + (self.p1.x * (mt * 2.0) + self.p2.x * t) * t,
            self.p0.y * (mt * mt) + (self.p1.y * (mt * 2.0) + self.p2.y * t) * t,
        )

    def start(self) -> Point:
        return self.p0

    def end(self) -> Point:
        return self.p2

    def subsegment(self, param_range: ParamRange) -> "QuadBez":
        """Restrict to ``[t0, t1]`` and re-parameterize to [0, 1]."""
        t0, t1 = param_range
        p0 = self.eval(t0)
        p2 = self.eval(t1)
        # Control point from the derivative at t0, scaled to the new range
        d0x = self.p1.x - self.p0.x
        d0y = self.p1.y - self.p0.y
        d1x = self.p2.x - self.p1.x
        d1y = self.p2.y - self.p1.y
        scale = t1 - t0
        p1 = Point(
            p0.x + (d0x + (d1x - d0x) * t0) * scale,
            p0.y + (d0y + (d1y - d0y) * t0) * scale,
        )
        return QuadBez(p0, p1, p2)

    def subdivide(self) -> tuple["QuadBez", "QuadBez"]:
        mid = self.eval(0.5)
        return (
            QuadBez(self.p0, self.p0.midpoint(self.p1), mid),
            QuadBez(mid, self.p1.midpoint(self.p2), self.p2),
        )

    def reverse(self) -> "QuadBez":
        return QuadBez(self.p2, self.p1, self.p0)

    def extrema(self) -> BoundedList[float]:
        """Interior parameters where the derivative of x or y vanishes."""
        result: BoundedList[float] = BoundedList(MAX_EXTREMA)
        d0x = self.p1.x - self.p0.x
        d0y = self.p1.y - self.p0.y
        ddx = (self.p2.x - self.p1.x) - d0x
        ddy = (self.p2.y - self.p1.y) - d0y
        candidates = []
        if ddx != 0.0:
            candidates.append(-d0x / ddx)
        if ddy != 0.0:
            candidates.append(-d0y / ddy)
        result.extend(sorted(t for t in candidates if 0.0 < t < 1.0))
        return result

    def solve_t_for_x(self, x: float) -> BoundedList[float]:
        return solve_quad_t_for_v(self.p0.x, self.p1.x, self.p2.x, x)

    def solve_t_for_y(self, y: float) -> BoundedList[float]:
        return solve_quad_t_for_v(self.p0.y, self.p1.y, self.p2.y, y)

    def intersect_line(self, line: Line) -> BoundedList[LineIntersection]:
        """Intersect with a probe line by solving a quadratic."""
        if _is_degenerate(line):
            return BoundedList(MAX_LINE_INTERSECTIONS)
        px = quad_coefficients(self.p0.x, self.p1.x, self.p2.x)
        py = quad_coefficients(self.p0.y, self.p1.y, self.p2.y)
        c0, c1, c2 = _implicit_line_coefficients(px, py, line)
        return _curve_line_hits(solve_quadratic(c0, c1, c2), px, py, line)


@dataclass(frozen=True, slots=True)
class CubicBez(_SegmentOps):
    """A cubic Bézier curve.

    Attributes:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    kind = "cubic"

    def control_points(self) -> tuple[Point, Point, Point, Point]:
        return (self.p0, self.p1, self.p2, self.p3)

    def eval(self, t: float) -> Point:
        mt = 1.0 - t
        mt3 = mt * mt * mt
        mt2_3 = mt * mt * 3.0
        mt_3 = mt * 3.0
        return Point(
            self.p0.x * mt3
            + (self.p1.x * mt2_3 + (self.p2.x * mt_3 + self.p3.x * t) * t) * t,
            self.p0.y * mt3
            + (self.p1.y * mt2_3 + (self.p2.y * mt_3 + self.p3.y * t) * t) * t,
        )

    def start(self) -> Point:
        return self.p0

    def end(self) -> Point:
        return self.p3

    def _deriv(self, t: float) -> tuple[float, float]:
        # Derivative is a quadratic over the control point differences.
        mt = 1.0 - t
        a, b, c = mt * mt, 2.0 * mt * t, t * t
        dx = 3.0 * (
            (self.p1.x - self.p0.x) * a
            + (self.p2.x - self.p1.x) * b
            + (self.p3.x - self.p2.x) * c
        )
        dy = 3.0 * (
            (self.p1.y - self.p0.y) * a
            + (self.p2.y - self.p1.y) * b
            + (self.p3.y - self.p2.y) * c
        )
        return dx, dy

    def subsegment(self, param_range: ParamRange) -> "CubicBez":
        """Restrict to ``[t0, t1]`` and re-parameterize to [0, 1].

        The inner control points follow from the endpoint tangents scaled
        by a third of the range length.
        """
        t0, t1 = param_range
        p0 = self.eval(t0)
        p3 = self.eval(t1)
        scale = (t1 - t0) / 3.0
        d0x, d0y = self._deriv(t0)
        d1x, d1y = self._deriv(t1)
        p1 = Point(p0.x + scale * d0x, p0.y + scale * d0y)
        p2 = Point(p3.x - scale * d1x, p3.y - scale * d1y)
        return CubicBez(p0, p1, p2, p3)

    def subdivide(self) -> tuple["CubicBez", "CubicBez"]:
        """Split at t=0.5 using De Casteljau's algorithm."""
        p0, p1, p2, p3 = self.p0, self.p1, self.p2, self.p3
        mid = self.eval(0.5)
        left = CubicBez(
            p0,
            p0.midpoint(p1),
            Point(
                (p0.x + p1.x * 2.0 + p2.x) * 0.25,
                (p0.y + p1.y * 2.0 + p2.y) * 0.25,
            ),
            mid,
        )
        right = CubicBez(
            mid,
            Point(
                (p1.x + p2.x * 2.0 + p3.x) * 0.25,
                (p1.y + p2.y * 2.0 + p3.y) * 0.25,
            ),
            p2.midpoint(p3),
            p3,
        )
        return left, right

    def reverse(self) -> "CubicBez":
        return CubicBez(self.p3, self.p2, self.p1, self.p0)

    def extrema(self) -> BoundedList[float]:
        """Interior parameters where the derivative of x or y vanishes.

        Each axis contributes the roots of its quadratic derivative.
        """

        def one_coord(d0: float, d1: float, d2: float) -> list[float]:
            a = d0 - 2.0 * d1 + d2
            b = 2.0 * (d1 - d0)
            return [t for t in solve_quadratic(d0, b, a) if 0.0 < t < 1.0]

        d0 = (self.p1.x - self.p0.x, self.p1.y - self.p0.y)
        d1 = (self.p2.x - self.p1.x, self.p2.y - self.p1.y)
        d2 = (self.p3.x - self.p2.x, self.p3.y - self.p2.y)
        candidates = one_coord(d0[0], d1[0], d2[0]) + one_coord(d0[1], d1[1], d2[1])
        return BoundedList(MAX_EXTREMA, sorted(candidates))

    def solve_t_for_x(self, x: float) -> BoundedList[float]:
        return solve_cubic_t_for_v(self.p0.x, self.p1.x, self.p2.x, self.p3.x, x)

    def solve_t_for_y(self, y: float) -> BoundedList[float]:
        return solve_cubic_t_for_v(self.p0.y, self.p1.y, self.p2.y, self.p3.y, y)

    def intersect_line(self, line: Line) -> BoundedList[LineIntersection]:
        """Intersect with a probe line by solving a cubic."""
        if _is_degenerate(line):
            return BoundedList(MAX_LINE_INTERSECTIONS)
        px = cubic_coefficients(self.p0.x, self.p1.x, self.p2.x, self.p3.x)
        py = cubic_coefficients(self.p0.y, self.p1.y, self.p2.y, self.p3.y)
        c0, c1, c2, c3 = _implicit_line_coefficients(px, py, line)
        return _curve_line_hits(solve_cubic(c0, c1, c2, c3), px, py, line)


PathSeg = Line | QuadBez | CubicBez

SEGMENT_TYPES: tuple[type, ...] = (Line, QuadBez, CubicBez)

_KINDS: dict[str, type] = {cls.kind: cls for cls in SEGMENT_TYPES}


def segment_from_points(points: list[Point] | tuple[Point, ...]) -> PathSeg:
    """Build the segment variant matching the number of control points.

    Args:
        points: 2 points for a line, 3 for a quadratic, 4 for a cubic

    Returns:
        The corresponding path segment

    Raises:
        UnsupportedSegmentError: If the point count is not 2, 3 or 4
    """
    if len(points) == 2:
        return Line(*points)
    elif len(points) == 3:
        return QuadBez(*points)
    elif len(points) == 4:
        return CubicBez(*points)
    else:
        raise UnsupportedSegmentError(f"expected 2-4 control points, got {len(points)}")


def segment_to_dict(seg: PathSeg) -> dict[str, Any]:
    """Serialize a segment to dictionary for IPC.

    Returns:
        Dictionary with kind and control point fields
    """
    return {
        "kind": seg.kind,
        "points": [p.to_dict() for p in seg.control_points()],
    }


def segment_from_dict(data: dict[str, Any]) -> PathSeg:
    """Deserialize a segment from dictionary.

    Raises:
        UnsupportedSegmentError: If the kind is unknown or does not match
            the number of points
    """
    kind = data.get("kind")
    cls = _KINDS.get(kind)  # type: ignore[arg-type]
    if cls is None:
        raise UnsupportedSegmentError(f"unknown segment kind {kind!r}")

    seg = segment_from_points([Point.from_dict(p) for p in data["points"]])
    if not isinstance(seg, cls):
        raise UnsupportedSegmentError(
            f"kind {kind!r} does not match {len(data['points'])} control points"
        )
    return seg
