"""Room visitor feeding a drawing surface."""

from __future__ import annotations

import copy

from roomgrid.core.room import Room
from roomgrid.mapdata.protocol import RoomDrawer
from roomgrid.storage import LockTable


class DrawStream:
    """Collects the rooms of a range query, then hands them to a drawer.

    Rooms are copied as they are visited so the drawer can never reach live
    map state.

    Args:
        locks: Lock table used to flag held rooms.
    """

    def __init__(self, locks: LockTable):
        self._locks = locks
        self._rooms: list[tuple[Room, bool]] = []

    def visit(self, room: Room) -> None:
        self._rooms.append((copy.deepcopy(room), self._locks.is_locked(room.id)))

    def draw(self, drawer: RoomDrawer) -> int:
        """Draw every collected room in visit order.

        Returns:
            Number of rooms drawn.
        """
        for room, locked in self._rooms:
            drawer.draw_room(room, locked)
        return len(self._rooms)
