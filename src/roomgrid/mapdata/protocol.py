"""Capabilities the facade consumes from its upstream callers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from roomgrid.core.room import Room
    from roomgrid.mapdata.frontend import MapFrontend


@runtime_checkable
class RoomRecipient(Protocol):
    """Receives rooms found by a search.

    Each delivered room is locked on behalf of the recipient; call
    frontend.unlock_room(recipient, room.id) once it is no longer needed.
    """

    def receive_room(self, frontend: MapFrontend, room: Room) -> None:
        """Receive one matching room (a copy)."""
        ...


@runtime_checkable
class RoomDrawer(Protocol):
    """Drawing surface fed by MapData.draw()."""

    def draw_room(self, room: Room, locked: bool) -> None:
        """Draw one room; locked tells whether anybody holds it."""
        ...


RoomFilter = Callable[["Room"], bool]
"""Predicate selecting rooms for MapData.generic_search()."""
