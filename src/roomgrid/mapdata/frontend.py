"""MapFrontend: owner of every map structure and of the lock guarding them.

Architecture Note:
    The spatial index, room index, lock table and parse tree form one unit
    guarded by a single re-entrant lock. Every structural operation and every
    action execution happens while holding it, so actions run strictly in
    submission order and a range visit never observes a half-applied action.
    Nothing done under the lock blocks on I/O.

Usage:
    frontend = MapFrontend()
    room_id = frontend.create_room(ParseEvent(name="Hall"), Coordinate(0, 0, 0))
    frontend.schedule_action(SingleRoomAction(MakePermanent(), room_id))
"""

from __future__ import annotations

import threading
from collections.abc import Hashable

from roomgrid.actions import MapAction
from roomgrid.config import RoomGridSettings
from roomgrid.core.coordinate import ORIGIN, Coordinate
from roomgrid.core.identity import RoomId
from roomgrid.core.room import ParseEvent, Room, merge_event
from roomgrid.logging import get_logger
from roomgrid.mapdata.selection import RoomSelection
from roomgrid.storage import (
    LockTable,
    ParseTree,
    RoomHomes,
    RoomIndex,
    SearchExhaustedError,
    SpatialIndex,
)

logger = get_logger(__name__)


class _HomingRoomFactory:
    """RoomFactory that registers new rooms and files them in the parse tree."""

    def __init__(self, frontend: MapFrontend):
        self._frontend = frontend

    def create_room(self) -> Room:
        room = self._frontend.room_index().create_room()
        self._frontend.parse_tree().home(room, self._frontend.room_homes())
        return room


class MapFrontend:
    """Single owner of the map structures and executor of actions.

    Args:
        settings: Engine settings (defaults are read from ROOMGRID_* env vars).
    """

    def __init__(self, settings: RoomGridSettings | None = None):
        self._settings = settings or RoomGridSettings()
        self._lock = threading.RLock()
        self._rooms = RoomIndex()
        self._map = SpatialIndex(self._rooms, max_search_radius=self._settings.max_search_radius)
        self._locks = LockTable()
        self._parse_tree = ParseTree()
        self._homes: RoomHomes = {}
        self._factory = _HomingRoomFactory(self)

    @property
    def settings(self) -> RoomGridSettings:
        return self._settings

    # Structure accessors handed to scheduled actions.
    # Callers outside an action must hold the lock while using them.

    def map(self) -> SpatialIndex:
        return self._map

    def parse_tree(self) -> ParseTree:
        return self._parse_tree

    def room_index(self) -> RoomIndex:
        return self._rooms

    def room_homes(self) -> RoomHomes:
        return self._homes

    def lock_table(self) -> LockTable:
        return self._locks

    # Room creation

    def create_room(
        self, event: ParseEvent | None = None, position: Coordinate = ORIGIN
    ) -> RoomId:
        """Create a temporary room at the free coordinate nearest to position.

        Args:
            event: Observed properties to initialise the room with.
            position: Desired coordinate.

        Returns:
            Id of the new room.

        Raises:
            SearchExhaustedError: If no free coordinate is within the search bound.
        """
        with self._lock:
            room = self._rooms.create_room(temporary=True)
            if event is not None:
                merge_event(room, event)
            try:
                self._map.set_nearest(position, room)
            except SearchExhaustedError:
                self._rooms.remove(room.id)
                raise
            self._parse_tree.home(room, self._homes)
            logger.debug(
                "room_created",
                room=room.id,
                position=(room.position.x, room.position.y, room.position.z),
            )
            return room.id

    def fill_area(self, low: Coordinate, high: Coordinate) -> list[RoomId]:
        """Create a default room on every free cell of the box low..high.

        Returns:
            Ids of the rooms created.
        """
        with self._lock:
            created = self._map.fill_area(self._factory, low, high)
            if created:
                logger.debug("area_filled", rooms=len(created))
            return [room.id for room in created]

    # Advisory locks

    def lock_room(self, holder: Hashable, room_id: RoomId) -> bool:
        """Register holder as depending on room_id.

        Returns:
            False (and no lock taken) if the room does not exist.
        """
        with self._lock:
            if room_id not in self._rooms:
                return False
            self._locks.lock(holder, room_id)
            return True

    def unlock_room(self, holder: Hashable, room_id: RoomId) -> None:
        with self._lock:
            self._locks.unlock(holder, room_id)

    def is_locked(self, room_id: RoomId) -> bool:
        with self._lock:
            return self._locks.is_locked(room_id)

    def release_selection(self, selection: RoomSelection) -> None:
        """Drop every lock selection holds and empty it."""
        with self._lock:
            for room_id in selection:
                self._locks.unlock(selection, room_id)
            selection.clear()

    # Action execution

    def is_executable(self, action: MapAction) -> bool:
        """Check whether a scheduled action may run now.

        Every affected room must still exist, and no room the action destroys
        may be held by anybody.
        """
        with self._lock:
            for room_id in action.affected_rooms():
                if room_id not in self._rooms:
                    return False
            for room_id in action.destroyed_rooms():
                if self._locks.is_locked(room_id):
                    return False
            return True

    def schedule_action(self, action: MapAction) -> bool:
        """Bind action to this frontend and run it if it is executable.

        Returns:
            True if the action ran.
        """
        with self._lock:
            action.schedule(self)
            return self._run_action(action)

    def _run_action(self, action: MapAction) -> bool:
        if not self.is_executable(action):
            logger.warning(
                "action_not_executable",
                action=repr(action),
                affected=action.affected_rooms(),
            )
            return False
        action.exec()
        logger.debug("action_executed", action=repr(action))
        return True

    # Lookup

    def find_rooms(self, event: ParseEvent) -> frozenset[RoomId]:
        """Ids of rooms whose name and description match event exactly."""
        with self._lock:
            return self._parse_tree.lookup(event)

    def room_count(self) -> int:
        with self._lock:
            return len(self._rooms)

    def clear(self) -> None:
        """Drop every room and all bookkeeping. Room ids keep increasing."""
        with self._lock:
            self._map.clear()
            self._rooms.clear()
            self._locks.clear()
            self._parse_tree.clear()
            self._homes.clear()
            logger.info("map_cleared")
