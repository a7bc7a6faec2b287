"""Capability protocols consumed by the storage layer.

The spatial index never creates or owns rooms itself. It borrows:
- a RoomFactory to materialise new rooms (fill_area),
- a RoomLookup to resolve stored RoomIds back into rooms (get_rooms),
- a RoomVisitor to hand each visited room to the caller.

Usage:
    class Collector:
        def __init__(self):
            self.rooms = []

        def visit(self, room):
            self.rooms.append(room)

    spatial.get_rooms(Collector(), Coordinate(0, 0, 0), Coordinate(5, 5, 0))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from roomgrid.core.identity import RoomId
    from roomgrid.core.room import Room


@runtime_checkable
class RoomFactory(Protocol):
    """Creates fresh, uniquely identified rooms with default field values."""

    def create_room(self) -> Room:
        """Create and register a new room."""
        ...


@runtime_checkable
class RoomVisitor(Protocol):
    """Receives rooms one at a time from a range query.

    Implementations must not mutate the spatial index from inside visit().
    """

    def visit(self, room: Room) -> None:
        """Receive one room."""
        ...


class RoomLookup(Protocol):
    """Resolves a RoomId into the live room, or None once it is gone."""

    def get(self, room_id: RoomId) -> Room | None:
        """Look up a room by id."""
        ...
