"""Tests for domain models to verify they work correctly."""

import math

import pytest

from bezsect.domain import Affine, BoundedList, Point, Rect, TranslateScale, approx_eq
from bezsect.exceptions import InvalidCapacityError


class TestApproxEq:
    """Tests for the approx_eq helper."""

    def test_within_tolerance(self) -> None:
        """Test values within tolerance compare equal."""
        assert approx_eq(1.0, 1.05, 0.1)
        assert not approx_eq(1.0, 1.2, 0.1)

    def test_nan_never_equal(self) -> None:
        """Test NaN is not approximately equal to anything."""
        assert not approx_eq(math.nan, math.nan, 1.0)
        assert not approx_eq(math.nan, 0.0, math.inf)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.5, -200.25)
        data = p1.to_dict()
        assert data == {"x": 100.5, "y": -200.25}
        assert Point.from_dict(data) == p1

    def test_point_is_immutable(self) -> None:
        """Test points cannot be modified."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 5.0  # type: ignore[misc]

    def test_lerp_and_midpoint(self) -> None:
        """Test interpolation between points."""
        a = Point(0.0, 0.0)
        b = Point(10.0, 20.0)
        assert a.lerp(b, 0.25) == Point(2.5, 5.0)
        assert a.midpoint(b) == Point(5.0, 10.0)

    def test_distance(self) -> None:
        """Test Euclidean distance."""
        assert Point(0.0, 0.0).distance(Point(3.0, 4.0)) == pytest.approx(5.0)

    def test_approx_eq_is_per_axis(self) -> None:
        """Test approximate equality checks each axis separately."""
        p = Point(0.0, 0.0)
        assert p.approx_eq(Point(0.4, -0.4), 0.5)
        assert not p.approx_eq(Point(0.4, 0.6), 0.5)


class TestRect:
    """Tests for Rect class."""

    def test_from_points_normalizes(self) -> None:
        """Test corners are sorted into min/max bounds."""
        r = Rect.from_points(Point(10.0, 0.0), Point(0.0, 5.0))
        assert r.to_tuple() == (0.0, 0.0, 10.0, 5.0)
        assert r.width == 10.0
        assert r.height == 5.0

    def test_union_pt(self) -> None:
        """Test growing a rect to include a point."""
        r = Rect(0.0, 0.0, 1.0, 1.0).union_pt(Point(3.0, -2.0))
        assert r.to_tuple() == (0.0, -2.0, 3.0, 1.0)

    def test_center(self) -> None:
        """Test center point."""
        assert Rect(0.0, 0.0, 4.0, 2.0).center() == Point(2.0, 1.0)

    def test_overlapping_rects(self) -> None:
        """Test rects sharing interior overlap."""
        assert Rect(0.0, 0.0, 2.0, 2.0).overlaps(Rect(1.0, 1.0, 3.0, 3.0))

    def test_touching_rects_do_not_overlap(self) -> None:
        """Test rects touching along an edge or a corner do not overlap."""
        a = Rect(0.0, 0.0, 1.0, 1.0)
        assert not a.overlaps(Rect(1.0, 0.0, 2.0, 1.0))
        assert not a.overlaps(Rect(1.0, 1.0, 2.0, 2.0))

    def test_disjoint_rects(self) -> None:
        """Test separated rects do not overlap."""
        assert not Rect(0.0, 0.0, 1.0, 1.0).overlaps(Rect(5.0, 5.0, 6.0, 6.0))

    def test_flat_rect_overlaps_when_crossing(self) -> None:
        """Test a zero-height rect still overlaps a rect it crosses."""
        flat = Rect(0.0, 2.5, 10.0, 2.5)
        assert flat.overlaps(Rect(0.0, 0.0, 10.0, 10.0))


class TestBoundedList:
    """Tests for BoundedList class."""

    def test_push_until_full(self) -> None:
        """Test pushing stops silently at capacity."""
        values: BoundedList[int] = BoundedList(2)
        assert values.push(1)
        assert values.push(2)
        assert values.is_full()
        assert not values.push(3)
        assert values.to_list() == [1, 2]

    def test_initial_items_are_truncated(self) -> None:
        """Test initial items beyond capacity are dropped."""
        values = BoundedList(3, range(10))
        assert len(values) == 3
        assert values == [0, 1, 2]

    def test_remaining(self) -> None:
        """Test remaining slot count."""
        values = BoundedList(4, [1.0])
        assert values.capacity == 4
        assert values.remaining == 3

    def test_zero_capacity(self) -> None:
        """Test a zero-capacity list is always full and empty."""
        values: BoundedList[float] = BoundedList(0)
        assert values.is_full()
        assert not values.push(1.0)
        assert len(values) == 0

    def test_negative_capacity_raises(self) -> None:
        """Test negative capacity is rejected."""
        with pytest.raises(InvalidCapacityError):
            BoundedList(-1)

    def test_sequence_protocol(self) -> None:
        """Test indexing, slicing and iteration."""
        values = BoundedList(5, [3, 1, 2])
        assert values[0] == 3
        assert values[-1] == 2
        assert values[1:] == [1, 2]
        assert sorted(values) == [1, 2, 3]
        assert 1 in values

    def test_equality(self) -> None:
        """Test equality against lists and other bounded lists."""
        assert BoundedList(2, [1, 2]) == BoundedList(5, [1, 2])
        assert BoundedList(2, [1, 2]) != [2, 1]
        assert BoundedList(2, [1]) != (1,)


class TestAffine:
    """Tests for Affine transforms."""

    def test_identity(self) -> None:
        """Test identity maps points to themselves."""
        p = Point(3.5, -7.25)
        assert Affine.identity().transform_point(p) == p

    def test_translate_and_scale(self) -> None:
        """Test translation and non-uniform scaling."""
        assert Affine.translate(1.0, 2.0).transform_point(Point(1.0, 1.0)) == Point(2.0, 3.0)
        assert Affine.scale(2.0, 3.0).transform_point(Point(1.0, 1.0)) == Point(2.0, 3.0)
        assert Affine.scale(2.0).transform_point(Point(1.0, 1.0)) == Point(2.0, 2.0)

    def test_rotate(self) -> None:
        """Test rotation by a quarter turn."""
        p = Affine.rotate(math.pi / 2).transform_point(Point(1.0, 0.0))
        assert p.approx_eq(Point(0.0, 1.0), 1e-12)

    def test_then_applies_in_order(self) -> None:
        """Test composition applies the receiver first."""
        combined = Affine.scale(2.0).then(Affine.translate(1.0, 0.0))
        assert combined.transform_point(Point(1.0, 1.0)) == Point(3.0, 2.0)

        reversed_order = Affine.translate(1.0, 0.0).then(Affine.scale(2.0))
        assert reversed_order.transform_point(Point(1.0, 1.0)) == Point(4.0, 2.0)

    def test_determinant(self) -> None:
        """Test determinant of scale and rotation."""
        assert Affine.scale(2.0, 3.0).determinant() == 6.0
        assert Affine.rotate(0.3).determinant() == pytest.approx(1.0)


class TestTranslateScale:
    """Tests for TranslateScale transforms."""

    def test_defaults_are_identity(self) -> None:
        """Test default transform is the identity."""
        assert TranslateScale() == TranslateScale.identity()
        assert TranslateScale().transform_point(Point(4.0, 5.0)) == Point(4.0, 5.0)

    def test_scale_then_translate(self) -> None:
        """Test scaling happens before translation."""
        ts = TranslateScale(translation=(1.0, -1.0), scale=2.0)
        assert ts.transform_point(Point(3.0, 4.0)) == Point(7.0, 7.0)

    def test_then(self) -> None:
        """Test composition matches applying both in sequence."""
        first = TranslateScale(translation=(1.0, 2.0), scale=2.0)
        second = TranslateScale(translation=(-3.0, 0.5), scale=0.5)
        p = Point(5.0, -1.0)
        expected = second.transform_point(first.transform_point(p))
        assert first.then(second).transform_point(p).approx_eq(expected, 1e-12)

    def test_to_affine(self) -> None:
        """Test widening to Affine gives the same mapping."""
        ts = TranslateScale(translation=(2.0, 3.0), scale=1.5)
        p = Point(-4.0, 8.0)
        assert ts.to_affine().transform_point(p) == ts.transform_point(p)
