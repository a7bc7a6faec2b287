"""Nearest-free-slot search over the integer lattice.

SpiralSearch yields offset vectors around the origin in shells of growing
Chebyshev radius. The caller applies each offset to its target (added or
subtracted, see search_sign) until it finds an unoccupied cell.

Within one shell the walk is driven by a 9-step schedule: eight sign flips
visit every octant reflection of the current unsigned offset, and the ninth
step advances the unsigned offset (z fastest, then y, then x) up to the
current threshold, growing the threshold once all three axes reached it.

Usage:
    for offset in SpiralSearch(max_radius=8):
        candidate = target + offset
        if candidate not in occupied:
            break
"""

from __future__ import annotations

from collections.abc import Iterator

from roomgrid.core.coordinate import Coordinate


class SearchExhaustedError(RuntimeError):
    """Raised when no free coordinate exists within the search radius bound."""

    pass


def search_sign(target: Coordinate) -> int:
    """Direction in which offsets are applied to target: +1 or -1.

    Decided once per search from the parity of the coordinate sum. Both
    orders visit the same shells, so this only breaks ties between equally
    distant free cells.
    """
    total = target.x + target.y + target.z
    return 1 if total // 2 == (total + 1) // 2 else -1


class SpiralSearch:
    """Restartable iterator of lattice offsets in growing cube shells.

    The first offset is the origin itself, then all 26 offsets of radius 1,
    then the 98 of radius 2, and so on. Each offset of a shell appears exactly
    once before any offset of the next shell.

    Args:
        max_radius: Stop (StopIteration) before entering a shell with a larger
            radius. None searches forever.

    Raises:
        ValueError: If max_radius is negative.
    """

    def __init__(self, max_radius: int | None = None):
        if max_radius is not None and max_radius < 0:
            raise ValueError(f"max_radius must be >= 0, got {max_radius}")
        self._max_radius = max_radius
        self.reset()

    def reset(self) -> None:
        """Restart from the origin."""
        self._x = 0
        self._y = 0
        self._z = 0
        self._threshold = 1
        self._state = 7
        self._radius = 0
        self._seen: set[Coordinate] = set()

    @property
    def radius(self) -> int:
        """Radius of the shell currently being walked."""
        return self._radius

    def __iter__(self) -> Iterator[Coordinate]:
        return self

    def __next__(self) -> Coordinate:
        while True:
            offset = self._step()
            if self._max_radius is not None and self._radius > self._max_radius:
                raise StopIteration
            # After the threshold grows, the whole inner cube is re-enumerated;
            # those offsets belong to finished shells.
            if offset.chebyshev() < self._radius or offset in self._seen:
                continue
            self._seen.add(offset)
            return offset

    def _step(self) -> Coordinate:
        """Advance the reflection schedule by one state."""
        match self._state:
            case 0:
                self._x, self._y, self._z = -self._x, -self._y, -self._z
            case 1:
                self._z = -self._z
            case 2:
                self._y, self._z = -self._y, -self._z
            case 3:
                self._x, self._y = -self._x, -self._y
            case 4:
                self._y = -self._y
            case 5:
                self._y, self._z = -self._y, -self._z
            case 6:
                self._x, self._y = -self._x, -self._y
            case 7:
                self._x = -self._x
            case 8:
                self._advance_magnitude()
                self._state = -1
        self._state += 1
        return Coordinate(self._x, self._y, self._z)

    def _advance_magnitude(self) -> None:
        # States 0-7 leave every axis non-negative again, so plain increments work.
        self._seen.clear()
        self._radius = max(self._radius, 1)
        if self._z < self._threshold:
            self._z += 1
            return
        self._z = 0
        if self._y < self._threshold:
            self._y += 1
            return
        self._y = 0
        if self._x >= self._threshold:
            self._threshold += 1
            self._radius = self._threshold
            self._x = 0
        else:
            self._x += 1


def nearest_offsets(target: Coordinate, max_radius: int | None = None) -> Iterator[Coordinate]:
    """Candidate coordinates around target, nearest shells first."""
    sign = search_sign(target)
    for offset in SpiralSearch(max_radius):
        yield target + offset if sign > 0 else target - offset
