"""Transform value types.

- Affine: A general 2D affine map (rotation, shear, scale, translation)
- TranslateScale: The cheaper uniform-scale-plus-translation subset
"""

import math
from dataclasses import dataclass

from bezsect.domain.point import Point


@dataclass(frozen=True, slots=True)
class Affine:
    """A 2D affine transform.

    Maps ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``.

    Attributes:
        a: x scale component of the x axis
        b: y shear component of the x axis
        c: x shear component of the y axis
        d: y scale component of the y axis
        e: x translation
        f: y translation
    """

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @classmethod
    def identity(cls) -> "Affine":
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @classmethod
    def translate(cls, dx: float, dy: float) -> "Affine":
        return cls(1.0, 0.0, 0.0, 1.0, dx, dy)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> "Affine":
        """Create a scale transform, uniform when ``sy`` is omitted."""
        if sy is None:
            sy = sx
        return cls(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @classmethod
    def rotate(cls, radians: float) -> "Affine":
        """Create a counter-clockwise rotation about the origin."""
        cos, sin = math.cos(radians), math.sin(radians)
        return cls(cos, sin, -sin, cos, 0.0, 0.0)

    def then(self, other: "Affine") -> "Affine":
        """Compose: apply this transform first, then ``other``.

        Args:
            other: Transform applied after this one

        Returns:
            Combined transform
        """
        return Affine(
            other.a * self.a + other.c * self.b,
            other.b * self.a + other.d * self.b,
            other.a * self.c + other.c * self.d,
            other.b * self.c + other.d * self.d,
            other.a * self.e + other.c * self.f + other.e,
            other.b * self.e + other.d * self.f + other.f,
        )

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def transform_point(self, point: Point) -> Point:
        """Map a point through the transform."""
        return Point(
            self.a * point.x + self.c * point.y + self.e,
            self.b * point.x + self.d * point.y + self.f,
        )


@dataclass(frozen=True, slots=True)
class TranslateScale:
    """A uniform scale followed by a translation.

    Maps ``p`` to ``translation + scale * p``. Unlike ``Affine`` it cannot
    rotate or shear, so it preserves axis-aligned structure such as curve
    monotonicity.

    Attributes:
        translation: (dx, dy) offset applied after scaling
        scale: Uniform scale factor
    """

    translation: tuple[float, float] = (0.0, 0.0)
    scale: float = 1.0

    @classmethod
    def identity(cls) -> "TranslateScale":
        return cls()

    def then(self, other: "TranslateScale") -> "TranslateScale":
        """Compose: apply this transform first, then ``other``."""
        dx, dy = self.translation
        odx, ody = other.translation
        return TranslateScale(
            (other.scale * dx + odx, other.scale * dy + ody),
            other.scale * self.scale,
        )

    def transform_point(self, point: Point) -> Point:
        dx, dy = self.translation
        return Point(dx + self.scale * point.x, dy + self.scale * point.y)

    def to_affine(self) -> Affine:
        """Widen to the equivalent general affine transform."""
        dx, dy = self.translation
        return Affine(self.scale, 0.0, 0.0, self.scale, dx, dy)
