"""Converters between fonttools pen recordings and path segments.

This module handles the conversion between fonttools drawing commands and
our segment types (Line, QuadBez, CubicBez), in both directions.
"""

from collections.abc import Sequence
from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment

from bezsect.core.segments import CubicBez, Line, PathSeg, QuadBez
from bezsect.domain import Point
from bezsect.exceptions import UnsupportedSegmentError

# Tolerance for deciding whether consecutive segments are connected
_CONNECT_TOLERANCE = 1e-9


def recording_to_segments(recording: list[tuple[str, tuple[Any, ...]]]) -> list[PathSeg]:
    """Convert RecordingPen recording to a list of path segments.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())

    Quadratic runs with implied on-curve points and cubic super-Béziers are
    decomposed into single segments.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        Segments in drawing order

    Raises:
        UnsupportedSegmentError: If a segment is drawn without a current
            point, a quadratic run has no on-curve end, or the command is
            unknown
    """
    segments: list[PathSeg] = []
    current: Point | None = None
    start: Point | None = None

    for command, args in recording:
        if command == "moveTo":
            current = start = Point(*args[0])
            continue

        if command in ("endPath", "closePath") and current is None:
            continue

        if current is None:
            raise UnsupportedSegmentError(f"'{command}' without a current point")

        if command == "lineTo":
            end = Point(*args[0])
            segments.append(Line(current, end))
            current = end

        elif command == "qCurveTo":
            if args[-1] is None:
                raise UnsupportedSegmentError("quadratic contour without on-curve points")
            for control, end_pt in decomposeQuadraticSegment(args):
                end = Point(*end_pt)
                segments.append(QuadBez(current, Point(*control), end))
                current = end

        elif command == "curveTo":
            if len(args) == 3:
                triples = [tuple(args)]
            else:
                triples = decomposeSuperBezierSegment(args)
            for c1, c2, end_pt in triples:
                end = Point(*end_pt)
                segments.append(CubicBez(current, Point(*c1), Point(*c2), end))
                current = end

        elif command == "closePath":
            if start is not None and not current.approx_eq(start, _CONNECT_TOLERANCE):
                segments.append(Line(current, start))
            current = start

        elif command == "endPath":
            pass

        else:
            raise UnsupportedSegmentError(f"unknown drawing command '{command}'")

    return segments


def draw_segments(segments: Sequence[PathSeg], pen: Any) -> None:
    """Draw segments onto any fontTools pen.

    A new subpath is started whenever a segment does not begin where the
    previous one ended. Subpaths are left open.

    Args:
        segments: Segments to draw
        pen: Object implementing the fontTools pen protocol
    """
    current: Point | None = None

    for seg in segments:
        points = [p.to_tuple() for p in seg.control_points()]
        if current is None or not current.approx_eq(seg.start(), _CONNECT_TOLERANCE):
            if current is not None:
                pen.endPath()
            pen.moveTo(points[0])

        if isinstance(seg, Line):
            pen.lineTo(points[1])
        elif isinstance(seg, QuadBez):
            pen.qCurveTo(points[1], points[2])
        else:
            pen.curveTo(points[1], points[2], points[3])

        current = seg.end()

    if current is not None:
        pen.endPath()
