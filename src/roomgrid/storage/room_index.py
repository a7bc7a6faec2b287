"""Canonical room ownership table.

RoomIndex is the only structure that owns rooms. The spatial index, lock
table, parse tree and selections hold RoomIds and resolve them here at the
time of use, so removing a room from RoomIndex is enough to make every other
reference miss instead of dangle.

Usage:
    rooms = RoomIndex()
    room = rooms.create_room(name="Hall")
    assert rooms.get(room.id) is room
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from roomgrid.core.identity import RoomId
from roomgrid.core.room import Room
from roomgrid.storage.allocator import RoomIdAllocator


class RoomIndex:
    """Arena of rooms keyed by RoomId.

    Iteration yields live rooms in id (creation) order.

    Args:
        allocator: Id source (a fresh RoomIdAllocator by default).
    """

    def __init__(self, allocator: RoomIdAllocator | None = None):
        self._allocator = allocator or RoomIdAllocator()
        self._rooms: dict[RoomId, Room] = {}

    def create_room(self, **fields: Any) -> Room:
        """Create, register and return a room with a fresh id.

        Args:
            **fields: Room field overrides (position, name, ...).

        Returns:
            The newly registered room.
        """
        room = Room(id=self._allocator.allocate(), **fields)
        self._rooms[room.id] = room
        return room

    def insert(self, room: Room) -> None:
        """Register an externally constructed room.

        Raises:
            ValueError: If a live room already uses the same id.
        """
        if room.id in self._rooms:
            raise ValueError(f"Room {room.id} already exists")
        self._allocator.observe(room.id)
        self._rooms[room.id] = room

    def get(self, room_id: RoomId) -> Room | None:
        """Return the live room with room_id, or None."""
        return self._rooms.get(room_id)

    def remove(self, room_id: RoomId) -> Room | None:
        """Unregister a room.

        Returns:
            The removed room, or None if it was not live.
        """
        return self._rooms.pop(room_id, None)

    def ids(self) -> list[RoomId]:
        return list(self._rooms)

    def clear(self) -> None:
        """Drop every room. Ids keep increasing afterwards."""
        self._rooms.clear()

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms

    def __iter__(self) -> Iterator[Room]:
        return iter(list(self._rooms.values()))

    def __len__(self) -> int:
        return len(self._rooms)
