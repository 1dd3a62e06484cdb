"""Capability sets shared by every curve type.

The recursive intersection solver and the monotone wrapper only rely on
these protocols, so any value offering the methods (a path segment, a
``Monotone`` wrapper, or a test double) can be passed to them.
"""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from bezsect.domain import BoundedList, Point, Rect

# A cubic has at most two extrema per axis.
MAX_EXTREMA = 4

ParamRange = tuple[float, float]

C = TypeVar("C", bound="ParamCurve")


class ParamCurve(Protocol):
    """A curve parameterized over ``t`` in [0, 1]."""

    def eval(self, t: float) -> Point: ...

    def start(self) -> Point: ...

    def end(self) -> Point: ...

    def subsegment(self: C, param_range: ParamRange) -> C: ...

    def subdivide(self: C) -> tuple[C, C]: ...


class ParamCurveExtrema(ParamCurve, Protocol):
    """A curve that can report its extrema and bounding box."""

    def extrema(self) -> BoundedList[float]: ...

    def extrema_ranges(self) -> BoundedList[ParamRange]: ...

    def bounding_box(self) -> Rect: ...


class ParamCurveSolve(ParamCurve, Protocol):
    """A curve that can solve for parameters at a given coordinate."""

    def solve_t_for_x(self, x: float) -> BoundedList[float]: ...

    def solve_t_for_y(self, y: float) -> BoundedList[float]: ...

    def solve_y_for_x(self, x: float) -> BoundedList[float]: ...

    def solve_x_for_y(self, y: float) -> BoundedList[float]: ...


def extrema_ranges_from(extrema: Iterable[float]) -> BoundedList[ParamRange]:
    """Split [0, 1] at each extremum.

    Args:
        extrema: Sorted interior parameter values

    Returns:
        Consecutive ranges covering the whole domain
    """
    result: BoundedList[ParamRange] = BoundedList(MAX_EXTREMA + 1)
    t0 = 0.0
    for t in extrema:
        result.push((t0, t))
        t0 = t
    result.push((t0, 1.0))
    return result


def bounding_box_from_extrema(curve: ParamCurveExtrema) -> Rect:
    """Compute an exact bounding box from endpoints and interior extrema."""
    bbox = Rect.from_points(curve.start(), curve.end())
    for t in curve.extrema():
        bbox = bbox.union_pt(curve.eval(t))
    return bbox
