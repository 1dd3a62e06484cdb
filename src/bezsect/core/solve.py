"""Coordinate solving: from a target x or y value to curve parameters.

Each function expands one coordinate of a curve's control points into
power-basis coefficients, subtracts the target value from the constant term,
and hands the polynomial to the root solvers. Roots are then filtered to the
parameter domain with a small slack so that endpoint hits survive rounding.
"""

from collections.abc import Iterable

from bezsect.core.roots import solve_cubic, solve_linear, solve_quadratic
from bezsect.domain import BoundedList

# A cubic crosses any coordinate value at most three times.
MAX_SOLVE = 3

SOLVE_EPSILON = 1e-6


def line_coefficients(p0: float, p1: float) -> tuple[float, float]:
    """Power-basis coefficients ``(c0, c1)`` of a linear Bézier coordinate."""
    return (p0, p1 - p0)


def quad_coefficients(p0: float, p1: float, p2: float) -> tuple[float, float, float]:
    """Power-basis coefficients ``(c0, c1, c2)`` of a quadratic Bézier coordinate."""
    return (p0, 2.0 * (p1 - p0), p0 - 2.0 * p1 + p2)


def cubic_coefficients(
    p0: float, p1: float, p2: float, p3: float
) -> tuple[float, float, float, float]:
    """Power-basis coefficients ``(c0, c1, c2, c3)`` of a cubic Bézier coordinate.

    Expands ``(1-t)^3 p0 + 3(1-t)^2 t p1 + 3(1-t) t^2 p2 + t^3 p3``.
    """
    return (
        p0,
        3.0 * (p1 - p0),
        3.0 * p0 - 6.0 * p1 + 3.0 * p2,
        -p0 + 3.0 * p1 - 3.0 * p2 + p3,
    )


def filter_t(roots: Iterable[float]) -> BoundedList[float]:
    """Keep the roots that fall inside the curve's parameter domain.

    Roots up to ``SOLVE_EPSILON`` outside ``[0, 1]`` are accepted, since an
    exact endpoint hit may land just outside after rounding. NaN roots are
    dropped.

    Args:
        roots: Candidate parameter values

    Returns:
        Accepted parameter values in their original order
    """
    return BoundedList(
        MAX_SOLVE,
        (t for t in roots if -SOLVE_EPSILON <= t <= 1.0 + SOLVE_EPSILON),
    )


def solve_line_t_for_v(p0: float, p1: float, v: float) -> BoundedList[float]:
    """Find all ``t`` where a line coordinate equals ``v``."""
    c0, c1 = line_coefficients(p0, p1)
    return filter_t(solve_linear(c0 - v, c1))


def solve_quad_t_for_v(p0: float, p1: float, p2: float, v: float) -> BoundedList[float]:
    """Find all ``t`` where a quadratic Bézier coordinate equals ``v``."""
    c0, c1, c2 = quad_coefficients(p0, p1, p2)
    return filter_t(solve_quadratic(c0 - v, c1, c2))


def solve_cubic_t_for_v(
    p0: float, p1: float, p2: float, p3: float, v: float
) -> BoundedList[float]:
    """Find all ``t`` where a cubic Bézier coordinate equals ``v``.

    Args:
        p0: Coordinate of the start point
        p1: Coordinate of the first control point
        p2: Coordinate of the second control point
        p3: Coordinate of the end point
        v: Target coordinate value

    Returns:
        Up to three parameter values in [0, 1] (with slack)
    """
    c0, c1, c2, c3 = cubic_coefficients(p0, p1, p2, p3)
    return filter_t(solve_cubic(c0 - v, c1, c2, c3))
