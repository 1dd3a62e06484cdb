"""Domain models for bezsect.

This module contains the value types that curve operations consume and
produce. All models are designed to be:

- Immutable (frozen dataclasses), except the result container
- Serializable for inter-process communication (batch processing)
- Free of any curve-solving logic of their own

Key classes:
- Point: A 2D point with tolerance-based comparison
- Rect: An axis-aligned bounding box
- Affine: A general affine transform
- TranslateScale: A uniform scale plus translation
- BoundedList: Fixed-capacity ordered result sequence
"""

from bezsect.domain.bounded import BoundedList
from bezsect.domain.point import Point, approx_eq
from bezsect.domain.rect import Rect
from bezsect.domain.transform import Affine, TranslateScale

__all__: list[str] = [
    # Core types
    "Point",
    "Rect",
    "approx_eq",
    # Transforms
    "Affine",
    "TranslateScale",
    # Containers
    "BoundedList",
]
