"""Recursive bounding-box intersection of two curves.

The general-purpose fallback used whenever no analytic solution applies:
both curves are subdivided until one of them is smaller than the requested
accuracy, discarding every pair of halves whose bounding boxes do not
overlap. Bounding boxes are computed through the curve protocol, so wrapping
monotone curves in ``Monotone`` makes every step O(1).
"""

import logging
from collections.abc import Iterable

from bezsect.core.curve import ParamCurveExtrema
from bezsect.domain import BoundedList, Point, Rect
from bezsect.exceptions import InvalidAccuracyError

logger = logging.getLogger(__name__)

# Two cubics intersect at most nine times.
GENERAL_CAPACITY = 9


def bboxes_overlap(a: Rect, b: Rect) -> bool:
    """Strict overlap test; boxes touching along an edge do not overlap."""
    return a.overlaps(b)


def extend_deduplicated(
    result: BoundedList[Point], points: Iterable[Point], tolerance: float
) -> None:
    """Merge points into ``result``, skipping near-duplicates.

    A point is skipped when it is within ``tolerance`` (per axis) of a point
    already collected. Merging stops once ``result`` is full.

    Args:
        result: Output collection, modified in place
        points: Candidate points in priority order
        tolerance: Duplicate radius
    """
    for point in points:
        if result.is_full():
            return
        if not any(p.approx_eq(point, tolerance) for p in result):
            result.push(point)


def _find_intersections(
    a: ParamCurveExtrema, b: ParamCurveExtrema, accuracy: float, capacity: int
) -> BoundedList[Point]:
    result: BoundedList[Point] = BoundedList(capacity)

    ba = a.bounding_box()
    bb = b.bounding_box()

    if not bboxes_overlap(ba, bb):
        return result

    # Once one curve is smaller than the accuracy any point inside it is a
    # good enough intersection, so pick the center of its box.
    if ba.width < accuracy and ba.height < accuracy:
        result.push(ba.center())
        return result

    if bb.width < accuracy and bb.height < accuracy:
        result.push(bb.center())
        return result

    a1, a2 = a.subdivide()
    b1, b2 = b.subdivide()

    double = 2.0 * accuracy
    for sub_a, sub_b in ((a1, b1), (a1, b2), (a2, b1), (a2, b2)):
        # Later branches could not add anything to a full result.
        if result.is_full():
            break
        extend_deduplicated(
            result, _find_intersections(sub_a, sub_b, accuracy, capacity), double
        )

    return result


def find_intersections_bbox(
    a: ParamCurveExtrema,
    b: ParamCurveExtrema,
    accuracy: float,
    capacity: int = GENERAL_CAPACITY,
) -> BoundedList[Point]:
    """Find the intersections of two curves by recursive subdivision.

    The points come in no particular order. When the curves share a
    sub-path, the boxes never separate and the output fills up to capacity
    with unspecified points along the shared part.

    Pick the capacity from the maximum number of intersections the curve
    degrees allow: 9 for two cubics, 3 for two monotone curves. Additional
    intersections are silently dropped.

    Args:
        a: First curve
        b: Second curve
        accuracy: Size below which a curve counts as a point; also half the
            radius within which two results count as the same intersection
        capacity: Maximum number of points to report

    Returns:
        Intersection points, each within ``accuracy`` of a true intersection

    Raises:
        InvalidAccuracyError: If accuracy is not a positive number
            (a precondition, checked in every build rather than asserted)
    """
    if not accuracy > 0.0:
        raise InvalidAccuracyError(accuracy)

    result = _find_intersections(a, b, accuracy, capacity)

    if result.is_full():
        logger.debug(
            "Intersection output saturated at capacity %d (accuracy=%g)",
            capacity, accuracy
        )

    return result
