"""Lattice coordinate models.

Usage:
    c = Coordinate(1, 2, 0)
    north = c + Coordinate(0, -1, 0)
    box = CoordinateBox.from_corners(Coordinate(3, 0, 0), Coordinate(0, 2, 1))
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, slots=True)
class Coordinate:
    """Integer 3-D lattice point with per-axis vector arithmetic.

    Ordering is z outermost, then y, then x, matching the spatial index layout.
    """

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Coordinate:
        return Coordinate(-self.x, -self.y, -self.z)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def sort_key(self) -> tuple[int, int, int]:
        """Key used for (z, y, x) ordering."""
        return (self.z, self.y, self.x)

    def chebyshev(self, other: Coordinate | None = None) -> int:
        """Largest per-axis distance to other (origin by default).

        This is the shell metric of the nearest-free search: every point on a
        search shell of radius r has chebyshev() == r relative to the target.
        """
        other = other or ORIGIN
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))


ORIGIN = Coordinate(0, 0, 0)
UNIT = Coordinate(1, 1, 1)


@dataclass(frozen=True, slots=True)
class CoordinateBox:
    """Inclusive axis-aligned box between two normalised corners."""

    min: Coordinate
    max: Coordinate

    @classmethod
    def from_corners(cls, a: Coordinate, b: Coordinate) -> CoordinateBox:
        """Build a box from any two opposite corners.

        Args:
            a: First corner.
            b: Opposite corner.

        Returns:
            Box whose min/max are the per-axis min/max of a and b.
        """
        return cls(
            min=Coordinate(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z)),
            max=Coordinate(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z)),
        )

    def expanded(self, radius: Coordinate = UNIT) -> CoordinateBox:
        """Return a copy grown by radius on every side."""
        return CoordinateBox(min=self.min - radius, max=self.max + radius)

    def contains(self, c: Coordinate) -> bool:
        return (
            self.min.x <= c.x <= self.max.x
            and self.min.y <= c.y <= self.max.y
            and self.min.z <= c.z <= self.max.z
        )

    def __contains__(self, c: object) -> bool:
        return isinstance(c, Coordinate) and self.contains(c)

    def __iter__(self) -> Iterator[Coordinate]:
        """Iterate every lattice point, z then y then x ascending."""
        for z in range(self.min.z, self.max.z + 1):
            for y in range(self.min.y, self.max.y + 1):
                for x in range(self.min.x, self.max.x + 1):
                    yield Coordinate(x, y, z)

    def __len__(self) -> int:
        return (
            (self.max.x - self.min.x + 1)
            * (self.max.y - self.min.y + 1)
            * (self.max.z - self.min.z + 1)
        )
