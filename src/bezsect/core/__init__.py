"""Core geometry algorithms for bezsect.

This module contains the core algorithms for:

- Polynomial root finding (linear, quadratic, cubic)
- Solving curves for a coordinate value
- Intersecting curves with lines, analytically
- Intersecting curves with curves, by recursive bounding-box subdivision
- Splitting curves into monotone pieces
- Applying transforms to segments

All functions are pure and allocate only small bounded results, so they
are safe for use in worker processes.

Key functions:
- solve_linear / solve_quadratic / solve_cubic: Real polynomial roots
- find_intersections_bbox: General curve/curve intersection
- intersect_split_monotone: Curve/curve intersection through monotone pieces
- apply_affine / apply_translate_scale: Transform a segment

Key classes:
- Line, QuadBez, CubicBez: Path segment variants
- Monotone: Wrapper for curves monotone in both dimensions
- BatchIntersector: Runs many pairs inline or in parallel
"""

from bezsect.core.curve import (
    MAX_EXTREMA,
    ParamCurve,
    ParamCurveExtrema,
    ParamCurveSolve,
    ParamRange,
)
from bezsect.core.intersect import (
    GENERAL_CAPACITY,
    bboxes_overlap,
    find_intersections_bbox,
)
from bezsect.core.monotone import (
    MONOTONE_CAPACITY,
    Monotone,
    intersect_split_monotone,
    split_monotone,
)
from bezsect.core.processor import (
    BatchIntersector,
    PairResult,
    intersect_pair,
    intersect_segments,
)
from bezsect.core.roots import solve_cubic, solve_linear, solve_quadratic
from bezsect.core.segments import (
    CubicBez,
    Line,
    LineIntersection,
    PathSeg,
    QuadBez,
    segment_from_dict,
    segment_from_points,
    segment_to_dict,
)
from bezsect.core.transform import apply_affine, apply_translate_scale

__all__ = [
    "GENERAL_CAPACITY",
    "MAX_EXTREMA",
    "MONOTONE_CAPACITY",
    # Processor classes
    "BatchIntersector",
    # Segment classes
    "CubicBez",
    "Line",
    "LineIntersection",
    "Monotone",
    "PairResult",
    "ParamCurve",
    "ParamCurveExtrema",
    "ParamCurveSolve",
    "ParamRange",
    "PathSeg",
    "QuadBez",
    # Functions
    "apply_affine",
    "apply_translate_scale",
    "bboxes_overlap",
    "find_intersections_bbox",
    "intersect_pair",
    "intersect_segments",
    "intersect_split_monotone",
    "segment_from_dict",
    "segment_from_points",
    "segment_to_dict",
    "solve_cubic",
    "solve_linear",
    "solve_quadratic",
    "split_monotone",
]
