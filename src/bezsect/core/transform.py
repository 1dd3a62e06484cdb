"""Apply transforms to path segments.

A transform maps every control point and keeps the segment variant: a line
stays a line and a cubic stays a cubic.
"""

from collections.abc import Callable

from bezsect.core.segments import SEGMENT_TYPES, PathSeg
from bezsect.domain import Affine, Point, TranslateScale


def _map_control_points(seg: PathSeg, func: Callable[[Point], Point]) -> PathSeg:
    if not isinstance(seg, SEGMENT_TYPES):
        raise TypeError(f"Expected a path segment, got {type(seg).__name__}")
    return type(seg)(*(func(p) for p in seg.control_points()))


def apply_affine(seg: PathSeg, affine: Affine) -> PathSeg:
    """Apply an affine transform to a path segment.

    Args:
        seg: Segment to transform
        affine: Transform to apply

    Returns:
        New segment of the same variant

    Raises:
        TypeError: If ``seg`` is not a path segment
    """
    return _map_control_points(seg, affine.transform_point)


def apply_translate_scale(seg: PathSeg, ts: TranslateScale) -> PathSeg:
    """Apply a translate-scale transform to a path segment."""
    return _map_control_points(seg, ts.transform_point)
