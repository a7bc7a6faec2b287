"""Coordinate-indexed spatial store.

Three nested ordered levels (z -> y -> x) map each occupied coordinate to the
RoomId bound there. Range queries walk only the existing branches inside the
requested bounds, one bisect per level.

The index never owns rooms: it stores RoomIds and resolves them through a
RoomLookup (normally the RoomIndex) when it has to hand rooms to a visitor.

Usage:
    spatial = SpatialIndex(rooms)
    spatial.set(Coordinate(0, 0, 0), room)
    spatial.get_rooms(visitor, Coordinate(-2, -2, 0), Coordinate(2, 2, 0))
    placed_at = spatial.set_nearest(Coordinate(0, 0, 0), other_room)
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterator
from typing import Generic, TypeVar

from roomgrid.core.coordinate import Coordinate, CoordinateBox
from roomgrid.core.identity import RoomId
from roomgrid.core.room import Room
from roomgrid.logging import get_logger
from roomgrid.storage.protocol import RoomFactory, RoomLookup, RoomVisitor
from roomgrid.storage.search import SearchExhaustedError, nearest_offsets

logger = get_logger(__name__)

V = TypeVar("V")


class _OrderedLevel(Generic[V]):
    """One axis level: int key -> value, with ordered inclusive range scans.

    Structure:
        _keys: sorted list of populated keys
        _values[key] = value
    """

    __slots__ = ("_keys", "_values")

    def __init__(self) -> None:
        self._keys: list[int] = []
        self._values: dict[int, V] = {}

    def get(self, key: int) -> V | None:
        return self._values.get(key)

    def set(self, key: int, value: V) -> None:
        if key not in self._values:
            insort(self._keys, key)
        self._values[key] = value

    def pop(self, key: int) -> V | None:
        if key not in self._values:
            return None
        del self._keys[bisect_left(self._keys, key)]
        return self._values.pop(key)

    def irange(self, low: int, high: int) -> Iterator[tuple[int, V]]:
        """Yield (key, value) for populated keys with low <= key <= high."""
        start = bisect_left(self._keys, low)
        stop = bisect_right(self._keys, high)
        for key in self._keys[start:stop]:
            yield key, self._values[key]

    def items(self) -> Iterator[tuple[int, V]]:
        for key in list(self._keys):
            yield key, self._values[key]

    def __contains__(self, key: int) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._keys)


class SpatialIndex:
    """Coordinate -> RoomId store with range visitation and free-slot search.

    At most one room occupies a coordinate; a coordinate without an entry is
    free. Empty y/x branches are pruned as soon as their last entry goes.

    Args:
        rooms: Resolves stored RoomIds back into rooms for visitors.
        max_search_radius: Bound for nearest-free searches (None = unbounded).
    """

    def __init__(self, rooms: RoomLookup, max_search_radius: int | None = None):
        self._rooms = rooms
        self._max_search_radius = max_search_radius
        self._map: _OrderedLevel[_OrderedLevel[_OrderedLevel[RoomId]]] = _OrderedLevel()
        self._size = 0

    def defined(self, c: Coordinate) -> bool:
        """Check whether a room is bound at c."""
        return self.get(c) is not None

    def get(self, c: Coordinate) -> RoomId | None:
        """Return the RoomId bound at c, or None. Never creates branches."""
        ymap = self._map.get(c.z)
        if ymap is None:
            return None
        xmap = ymap.get(c.y)
        if xmap is None:
            return None
        return xmap.get(c.x)

    def set(self, c: Coordinate, room: Room) -> None:
        """Bind room at c, silently replacing whatever was bound there.

        The room's own position is not touched; set_nearest and fill_area
        write it back, plain set leaves that to the caller.
        """
        ymap = self._map.get(c.z)
        if ymap is None:
            ymap = _OrderedLevel()
            self._map.set(c.z, ymap)
        xmap = ymap.get(c.y)
        if xmap is None:
            xmap = _OrderedLevel()
            ymap.set(c.y, xmap)
        if c.x not in xmap:
            self._size += 1
        xmap.set(c.x, room.id)

    def remove(self, c: Coordinate) -> None:
        """Unbind whatever occupies c. Removing a free coordinate is a no-op."""
        ymap = self._map.get(c.z)
        if ymap is None:
            return
        xmap = ymap.get(c.y)
        if xmap is None:
            return
        if xmap.pop(c.x) is None:
            return
        self._size -= 1
        if not xmap:
            ymap.pop(c.y)
            if not ymap:
                self._map.pop(c.z)

    def clear(self) -> None:
        """Unbind everything."""
        self._map = _OrderedLevel()
        self._size = 0

    def get_rooms(self, visitor: RoomVisitor, low: Coordinate, high: Coordinate) -> None:
        """Visit every room inside the box spanned by low and high, padded by one.

        The corners are normalised per axis and the box is grown by one cell
        on every side, so callers also see the rooms their exits lead into.
        Visit order is z, then y, then x ascending.

        Args:
            visitor: Receives each room.
            low: One corner of the box.
            high: The opposite corner.
        """
        box = CoordinateBox.from_corners(low, high).expanded()
        for _, ymap in self._map.irange(box.min.z, box.max.z):
            for _, xmap in ymap.irange(box.min.y, box.max.y):
                for _, room_id in xmap.irange(box.min.x, box.max.x):
                    room = self._rooms.get(room_id)
                    if room is not None:
                        visitor.visit(room)

    def fill_area(self, factory: RoomFactory, low: Coordinate, high: Coordinate) -> list[Room]:
        """Materialise a room on every free cell of the (unpadded) box.

        Occupied cells keep their room.

        Args:
            factory: Creates each new room.
            low: One corner of the box.
            high: The opposite corner.

        Returns:
            The rooms created, in z, y, x order.
        """
        created: list[Room] = []
        for c in CoordinateBox.from_corners(low, high):
            if self.defined(c):
                continue
            room = factory.create_room()
            room.position = c
            self.set(c, room)
            created.append(room)
        return created

    def nearest_free(self, target: Coordinate) -> Coordinate:
        """Find the free coordinate closest to target (target itself if free).

        Raises:
            SearchExhaustedError: If every cell within the search bound is taken.
        """
        for candidate in nearest_offsets(target, self._max_search_radius):
            if not self.defined(candidate):
                return candidate
        logger.error(
            "search_exhausted",
            target=(target.x, target.y, target.z),
            max_radius=self._max_search_radius,
        )
        raise SearchExhaustedError(
            f"No free coordinate within radius {self._max_search_radius} of {target}"
        )

    def set_nearest(self, target: Coordinate, room: Room) -> Coordinate:
        """Bind room at the free coordinate nearest to target.

        Writes the chosen coordinate onto the room. The room's previous
        binding, if any, stays in place; vacating it is the caller's job.

        Returns:
            The coordinate the room was bound at.
        """
        c = self.nearest_free(target)
        self.set(c, room)
        room.position = c
        return c

    def coordinates(self) -> Iterator[Coordinate]:
        """Every occupied coordinate, z then y then x ascending."""
        for z, ymap in self._map.items():
            for y, xmap in ymap.items():
                for x, _ in xmap.items():
                    yield Coordinate(x, y, z)

    def __contains__(self, c: object) -> bool:
        return isinstance(c, Coordinate) and self.defined(c)

    def __len__(self) -> int:
        return self._size
