"""Room id allocation service.

RoomIdAllocator is a stateful service that hands out room ids.
"""

from __future__ import annotations

from roomgrid.core.identity import RoomId


class RoomIdAllocator:
    """Allocates monotonically increasing room ids.

    Ids are never recycled: a removed room's id stays dead forever, which is
    what lets actions detect that their target disappeared between scheduling
    and execution.

    Args:
        first: First id value to hand out (default 0).
    """

    def __init__(self, first: int = 0):
        self._next_value = first

    def allocate(self) -> RoomId:
        """Allocate the next room id.

        Returns:
            Newly allocated RoomId.
        """
        room_id = RoomId(self._next_value)
        self._next_value += 1
        return room_id

    def peek(self) -> RoomId:
        """Id the next allocate() call will return, without consuming it."""
        return RoomId(self._next_value)

    def observe(self, room_id: RoomId) -> None:
        """Make sure future ids are greater than an externally chosen one.

        Args:
            room_id: Id that is already in use.
        """
        if room_id.value >= self._next_value:
            self._next_value = room_id.value + 1
