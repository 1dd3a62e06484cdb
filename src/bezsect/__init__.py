"""bezsect - Bézier curve geometry.

bezsect solves and intersects path segments (lines, quadratic and cubic
Béziers). It finds polynomial roots, solves curves for a coordinate,
intersects curves with lines analytically and with each other by recursive
bounding-box subdivision, and applies affine transforms.

Example:
    $ bezsect intersect "M0 0C10 0 10 10 0 10" "M-5 5L15 5"

All results are small and bounded; the capacity of each result is part of
the call, and additional roots or intersections are dropped.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
