"""Tests for lattice coordinates and boxes."""

from hypothesis import given
from hypothesis import strategies as st

from roomgrid.core.coordinate import ORIGIN, UNIT, Coordinate, CoordinateBox

ints = st.integers(min_value=-50, max_value=50)
coordinates = st.builds(Coordinate, ints, ints, ints)


def test_arithmetic_is_per_axis():
    a = Coordinate(1, 2, 3)
    b = Coordinate(-4, 5, 0)

    assert a + b == Coordinate(-3, 7, 3)
    assert a - b == Coordinate(5, -3, 3)
    assert -a == Coordinate(-1, -2, -3)


@given(a=coordinates, b=coordinates)
def test_addition_and_subtraction_are_inverse(a, b):
    assert (a + b) - b == a


def test_ordering_is_z_then_y_then_x():
    """Coordinates sort the way the spatial index visits them."""
    points = [Coordinate(0, 0, 1), Coordinate(5, 0, 0), Coordinate(0, 1, 0), Coordinate(-1, 0, 0)]

    assert sorted(points) == [
        Coordinate(-1, 0, 0),
        Coordinate(5, 0, 0),
        Coordinate(0, 1, 0),
        Coordinate(0, 0, 1),
    ]


def test_coordinates_are_hashable_values():
    assert len({Coordinate(1, 1, 1), Coordinate(1, 1, 1), UNIT}) == 1


def test_chebyshev_is_largest_axis_distance():
    assert Coordinate(3, -7, 2).chebyshev() == 7
    assert Coordinate(3, -7, 2).chebyshev(Coordinate(3, -7, 2)) == 0
    assert ORIGIN.chebyshev(Coordinate(1, 1, -1)) == 1


def test_box_normalises_corners():
    box = CoordinateBox.from_corners(Coordinate(3, -1, 2), Coordinate(0, 4, -2))

    assert box.min == Coordinate(0, -1, -2)
    assert box.max == Coordinate(3, 4, 2)


def test_box_expansion_grows_every_side():
    box = CoordinateBox.from_corners(ORIGIN, ORIGIN).expanded()

    assert box.min == Coordinate(-1, -1, -1)
    assert box.max == Coordinate(1, 1, 1)
    assert len(box) == 27


def test_box_iteration_is_inclusive_and_ordered():
    box = CoordinateBox.from_corners(Coordinate(0, 0, 0), Coordinate(1, 1, 1))
    points = list(box)

    assert len(points) == len(box) == 8
    assert points == sorted(points)
    assert all(p in box for p in points)
    assert Coordinate(2, 0, 0) not in box


@given(a=coordinates, b=coordinates, c=coordinates)
def test_box_contains_matches_corner_bounds(a, b, c):
    box = CoordinateBox.from_corners(a, b)
    inside = all(
        min(lo, hi) <= v <= max(lo, hi)
        for lo, hi, v in ((a.x, b.x, c.x), (a.y, b.y, c.y), (a.z, b.z, c.z))
    )

    assert box.contains(c) == inside
