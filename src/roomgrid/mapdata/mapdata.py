"""MapData: the facade upstream callers use for every map read and write.

Reads take the frontend lock for their duration and return deep copies.
Writes never touch a room inline: each one becomes a scheduled action, so
there is only ever one writer at a time even for what looks like a setter.

Usage:
    mapdata = MapData()
    selection = RoomSelection("editor")
    room = mapdata.get_room_for(Coordinate(0, 0, 0), selection)
    mapdata.toggle_room_flag(room.position, RoomFieldValue(RoomField.MOB_FLAGS, MobFlags.SHOP))
    mapdata.execute(SingleRoomAction(Remove(), room.id), selection)
"""

from __future__ import annotations

import copy
from collections.abc import Iterable

from roomgrid.actions import (
    MapAction,
    ModifyExitFlags,
    ModifyRoomFlags,
    SingleRoomAction,
    UpdateExitField,
    UpdateRoomField,
)
from roomgrid.core.coordinate import Coordinate
from roomgrid.core.identity import RoomId
from roomgrid.core.room import (
    ALL_EXITS7,
    ALL_EXITS_NESWUD,
    CommandId,
    ExitDirection,
    ExitField,
    ExitFieldValue,
    FlagModifyMode,
    Room,
    RoomField,
    RoomFieldValue,
    UnhandledFieldError,
    direction_of,
    is_direction_neswud,
)
from roomgrid.core.types import Copy
from roomgrid.logging import get_logger
from roomgrid.mapdata.draw import DrawStream
from roomgrid.mapdata.frontend import MapFrontend
from roomgrid.mapdata.protocol import RoomDrawer, RoomFilter, RoomRecipient
from roomgrid.mapdata.selection import RoomSelection

logger = get_logger(__name__)

DEFAULT_DOOR_NAME = "exit"


class MapData(MapFrontend):
    """Coordinate-keyed query and mutation-request surface over MapFrontend."""

    def _room_at(self, pos: Coordinate) -> Room | None:
        room_id = self._map.get(pos)
        if room_id is None:
            return None
        return self._rooms.get(room_id)

    # Transactional execution

    def execute(self, action: MapAction, selection: RoomSelection) -> bool:
        """Run action on behalf of selection.

        The selection's holds are released for the duration of the action so
        it may mutate or remove the selected rooms, then re-acquired for every
        room that still exists, even if the action raises. Rooms the action
        removed silently drop out of the selection.

        Args:
            action: Freshly constructed action.
            selection: Selection the caller is acting through.

        Returns:
            True if the action ran, False if it was not executable.
        """
        with self._lock:
            action.schedule(self)
            selected = selection.ids()
            for room_id in selected:
                self._locks.unlock(selection, room_id)
            selection.clear()

            try:
                return self._run_action(action)
            finally:
                for room_id in selected:
                    if room_id in self._rooms:
                        self._locks.lock(selection, room_id)
                        selection.add(room_id)

    # Room queries

    def get_room(self, pos: Coordinate) -> Copy[Room] | None:
        """Copy of the room at pos, or None."""
        with self._lock:
            room = self._room_at(pos)
            return copy.deepcopy(room) if room is not None else None

    def get_room_for(self, pos: Coordinate, selection: RoomSelection) -> Copy[Room] | None:
        """Copy of the room at pos, adding it (and its lock) to selection."""
        with self._lock:
            room = self._room_at(pos)
            if room is None:
                return None
            self._locks.lock(selection, room.id)
            selection.add(room.id)
            return copy.deepcopy(room)

    def get_room_by_id(self, room_id: RoomId, selection: RoomSelection) -> Copy[Room] | None:
        """Copy of the room with room_id, adding it (and its lock) to selection."""
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                return None
            self._locks.lock(selection, room.id)
            selection.add(room.id)
            return copy.deepcopy(room)

    def get_room_flag(self, pos: Coordinate, value: RoomFieldValue) -> bool:
        """Check whether the room at pos matches value.

        Flag fields match when any of the given bits is set; other fields
        match on equality.

        Raises:
            UnhandledFieldError: For NAME and DESC, which are not flag-like.
        """
        with self._lock:
            room = self._room_at(pos)
            if room is None:
                return False
            match value.field:
                case RoomField.NOTE:
                    return value.value == room.note
                case RoomField.MOB_FLAGS:
                    return bool(room.mob_flags & value.value)
                case RoomField.LOAD_FLAGS:
                    return bool(room.load_flags & value.value)
                case RoomField.TERRAIN_TYPE:
                    return value.value == room.terrain
                case RoomField.LIGHT_TYPE:
                    return value.value == room.light
                case RoomField.NAME | RoomField.DESC:
                    raise UnhandledFieldError(f"{value.field.name} cannot be queried as a flag")
                case _:
                    raise UnhandledFieldError(f"Unknown room field {value.field}")

    def toggle_room_flag(self, pos: Coordinate, value: RoomFieldValue) -> bool:
        """Request a flag toggle (flag fields) or an overwrite (other fields).

        Returns:
            True if the change was applied.
        """
        with self._lock:
            room = self._room_at(pos)
            if room is None:
                return False
            if value.is_flags:
                mutation = ModifyRoomFlags(value, FlagModifyMode.TOGGLE)
            else:
                mutation = UpdateRoomField(value)
            return self.schedule_action(SingleRoomAction(mutation, room.id))

    # Exit queries

    def get_exit_directions(self, pos: Coordinate) -> frozenset[ExitDirection]:
        """Directions in which the room at pos has an exit."""
        with self._lock:
            room = self._room_at(pos)
            if room is None:
                return frozenset()
            return frozenset(d for d in ALL_EXITS7 if room.exit(d).is_exit())

    def get_door_name(self, pos: Coordinate, direction: ExitDirection) -> str:
        """Door name of an exit, or "exit" when there is no such room or exit."""
        with self._lock:
            room = self._room_at(pos)
            if room is not None and direction < ExitDirection.UNKNOWN:
                return room.exit(direction).door_name
            return DEFAULT_DOOR_NAME

    def set_door_name(self, pos: Coordinate, door_name: str, direction: ExitDirection) -> bool:
        """Request a door rename. Returns True if it was applied."""
        with self._lock:
            room = self._room_at(pos)
            if room is None or not direction < ExitDirection.UNKNOWN:
                return False
            value = ExitFieldValue(ExitField.DOOR_NAME, door_name)
            return self.schedule_action(
                SingleRoomAction(UpdateExitField(value, direction), room.id)
            )

    def get_exit_flag(self, pos: Coordinate, direction: ExitDirection, value: ExitFieldValue) -> bool:
        """Check whether any of value's bits is set on an exit.

        Raises:
            ValueError: If value is a door name (use get_door_name).
        """
        if value.field is ExitField.DOOR_NAME:
            raise ValueError("Door names are not flags; use get_door_name()")
        with self._lock:
            room = self._room_at(pos)
            if room is None or not direction < ExitDirection.NONE:
                return False
            ex = room.exit(direction)
            match value.field:
                case ExitField.EXIT_FLAGS:
                    return bool(ex.exit_flags & value.value)
                case ExitField.DOOR_FLAGS:
                    return bool(ex.door_flags & value.value)
                case _:
                    raise UnhandledFieldError(f"Unknown exit field {value.field}")

    def toggle_exit_flag(
        self, pos: Coordinate, direction: ExitDirection, value: ExitFieldValue
    ) -> bool:
        """Request a flag toggle on an exit. Returns True if it was applied.

        Raises:
            ValueError: If value is a door name (use set_door_name).
        """
        if value.field is ExitField.DOOR_NAME:
            raise ValueError("Door names are not flags; use set_door_name()")
        with self._lock:
            room = self._room_at(pos)
            if room is None or not direction < ExitDirection.NONE:
                return False
            return self.schedule_action(
                SingleRoomAction(
                    ModifyExitFlags(value, direction, FlagModifyMode.TOGGLE), room.id
                )
            )

    def remove_door_names(self) -> int:
        """Request clearing every door name on every compass exit.

        Returns:
            Number of rooms processed.
        """
        empty = ExitFieldValue(ExitField.DOOR_NAME, "")
        with self._lock:
            rooms = list(self._rooms)
            for room in rooms:
                for direction in ALL_EXITS_NESWUD:
                    self.schedule_action(
                        SingleRoomAction(UpdateExitField(empty, direction), room.id)
                    )
            return len(rooms)

    # Traversal

    def get_path(self, start: Coordinate, commands: Iterable[CommandId]) -> list[Coordinate]:
        """Follow movement commands from start through unambiguous exits.

        LOOK commands are skipped. The walk stops, without error, at the first
        non-movement command, missing exit, exit with several destinations or
        destination that no longer exists.

        Returns:
            Coordinates of every room entered, in order.
        """
        path: list[Coordinate] = []
        with self._lock:
            room = self._room_at(start)
            if room is None:
                return path
            for command in commands:
                if command is CommandId.LOOK:
                    continue
                if not is_direction_neswud(command):
                    break
                ex = room.exit(direction_of(command))
                if not ex.is_exit() or not ex.out_is_unique():
                    break
                target_id = ex.out_first()
                next_room = self._rooms.get(target_id) if target_id is not None else None
                if next_room is None:
                    break
                room = next_room
                path.append(room.position)
        return path

    # Bulk access

    def draw(self, low: Coordinate, high: Coordinate, drawer: RoomDrawer) -> int:
        """Draw every room in the (padded) box low..high.

        Returns:
            Number of rooms drawn.
        """
        with self._lock:
            stream = DrawStream(self._locks)
            self._map.get_rooms(stream, low, high)
            return stream.draw(drawer)

    def generic_search(self, recipient: RoomRecipient, room_filter: RoomFilter) -> int:
        """Deliver every room matching room_filter to recipient.

        Each match is locked on behalf of recipient before delivery.

        Returns:
            Number of rooms delivered.
        """
        delivered = 0
        with self._lock:
            for room in self._rooms:
                if not room_filter(room):
                    continue
                self._locks.lock(recipient, room.id)
                recipient.receive_room(self, copy.deepcopy(room))
                delivered += 1
        logger.debug("search_completed", delivered=delivered)
        return delivered
