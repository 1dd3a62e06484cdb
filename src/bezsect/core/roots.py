"""Closed-form real root solvers for polynomials of degree 1 to 3.

Each solver takes coefficients in ascending order, so ``solve_cubic(c0, c1,
c2, c3)`` solves ``c0 + c1*t + c2*t**2 + c3*t**3 = 0``. Degenerate leading
coefficients fall through to the lower-degree solver, so callers never have
to classify the degree first.

The solvers never raise on numeric trouble. Square roots of negative values
become NaN, which is dropped by every downstream domain filter.
"""

import math

from bezsect.domain import BoundedList

_ONE_THIRD = 1.0 / 3.0
_SQRT_3 = math.sqrt(3.0)


def _sqrt(value: float) -> float:
    # NaN instead of ValueError for negative input
    return math.sqrt(value) if value >= 0.0 else math.nan


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** _ONE_THIRD, value)


def _is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def solve_linear(c0: float, c1: float) -> BoundedList[float]:
    """Find the real root of ``c0 + c1*t = 0``.

    Args:
        c0: Constant coefficient
        c1: Linear coefficient

    Returns:
        At most one root. When both coefficients are zero every ``t`` is a
        solution and ``0.0`` is reported.
    """
    result: BoundedList[float] = BoundedList(1)
    if c1 == 0.0:
        if c0 == 0.0:
            result.push(0.0)
        return result

    root = -c0 / c1
    if math.isfinite(root):
        result.push(root)
    return result


def solve_quadratic(c0: float, c1: float, c2: float) -> BoundedList[float]:
    """Find the real roots of ``c0 + c1*t + c2*t**2 = 0``.

    Uses the numerically stable form of the quadratic formula and computes
    the second root from the product of roots.

    Args:
        c0: Constant coefficient
        c1: Linear coefficient
        c2: Quadratic coefficient

    Returns:
        Up to two roots in ascending order. A double root is reported once.
    """
    result: BoundedList[float] = BoundedList(2)

    if c2 == 0.0:
        result.extend(solve_linear(c0, c1))
        return result

    sc0 = c0 / c2
    sc1 = c1 / c2
    if not _is_finite(sc0, sc1):
        # c2 is tiny compared to the others, so treat as linear
        result.extend(solve_linear(c0, c1))
        return result

    arg = sc1 * sc1 - 4.0 * sc0
    if not math.isfinite(arg):
        # sc1 * sc1 overflowed: take -sc1 from sc1*t + t**2 = 0 and get the
        # other root from the product of roots below.
        root1 = -sc1
    elif arg < 0.0:
        return result
    elif arg == 0.0:
        result.push(-0.5 * sc1)
        return result
    else:
        root1 = -0.5 * (sc1 + math.copysign(math.sqrt(arg), sc1))

    root2 = sc0 / root1 if root1 != 0.0 else math.inf
    if math.isfinite(root2):
        result.extend(sorted((root1, root2)))
    else:
        result.push(root1)
    return result


def solve_cubic(c0: float, c1: float, c2: float, c3: float) -> BoundedList[float]:
    """Find the real roots of ``c0 + c1*t + c2*t**2 + c3*t**3 = 0``.

    Normalizes to a monic cubic and classifies by the sign of the
    discriminant: one real root (Cardano), a repeated root, or three real
    roots (trigonometric method).

    Args:
        c0: Constant coefficient
        c1: Linear coefficient
        c2: Quadratic coefficient
        c3: Cubic coefficient

    Returns:
        Up to three roots, unordered. Repeated roots may appear twice.
    """
    result: BoundedList[float] = BoundedList(3)

    if c3 == 0.0:
        result.extend(solve_quadratic(c0, c1, c2))
        return result

    scaled_c2 = c2 * (_ONE_THIRD / c3)
    scaled_c1 = c1 * (_ONE_THIRD / c3)
    scaled_c0 = c0 / c3
    if not _is_finite(scaled_c0, scaled_c1, scaled_c2):
        # Cubic coefficient is zero or nearly so
        result.extend(solve_quadratic(c0, c1, c2))
        return result

    c0, c1, c2 = scaled_c0, scaled_c1, scaled_c2

    d0 = -c2 * c2 + c1
    d1 = -c1 * c2 + c0
    d2 = c2 * c0 - c1 * c1
    discriminant = 4.0 * d0 * d2 - d1 * d1
    depressed = -2.0 * c2 * d0 + d1

    if discriminant < 0.0:
        sq = math.sqrt(-0.25 * discriminant)
        r = -0.5 * depressed
        t1 = _cbrt(r + sq) + _cbrt(r - sq)
        result.push(t1 - c2)
    elif discriminant == 0.0:
        t1 = math.copysign(_sqrt(-d0), depressed)
        result.push(t1 - c2)
        result.push(-2.0 * t1 - c2)
    else:
        theta = math.atan2(_sqrt(discriminant), -depressed) * _ONE_THIRD
        cos_th, sin_th = math.cos(theta), math.sin(theta)
        ss3 = sin_th * _SQRT_3
        r0 = cos_th
        r1 = 0.5 * (-cos_th + ss3)
        r2 = 0.5 * (-cos_th - ss3)
        t = 2.0 * _sqrt(-d0)
        result.push(t * r0 - c2)
        result.push(t * r1 - c2)
        result.push(t * r2 - c2)

    return result
