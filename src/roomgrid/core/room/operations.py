"""Field-level mutation helpers for rooms and exits.

These functions change exactly one room (or one exit slot) and know nothing
about locking or indexes. Actions call them while the frontend lock is held.
"""

from __future__ import annotations

from roomgrid.core.identity import RoomId
from roomgrid.core.room.models import (
    Exit,
    ExitField,
    ExitFieldValue,
    ExitFlags,
    FlagModifyMode,
    ParseEvent,
    Room,
    RoomField,
    RoomFieldValue,
    UnhandledFieldError,
    modify_flags,
)


def set_room_field(room: Room, value: RoomFieldValue) -> None:
    """Overwrite the room field named by value.

    Raises:
        UnhandledFieldError: If the field kind has no assignment branch.
    """
    match value.field:
        case RoomField.NAME:
            room.name = value.value
        case RoomField.DESC:
            room.description = value.value
        case RoomField.NOTE:
            room.note = value.value
        case RoomField.MOB_FLAGS:
            room.mob_flags = value.value
        case RoomField.LOAD_FLAGS:
            room.load_flags = value.value
        case RoomField.TERRAIN_TYPE:
            room.terrain = value.value
        case RoomField.LIGHT_TYPE:
            room.light = value.value
        case _:
            raise UnhandledFieldError(f"No setter for room field {value.field}")


def modify_room_flags(room: Room, value: RoomFieldValue, mode: FlagModifyMode) -> None:
    """Set, clear or toggle mob/load flag bits.

    Raises:
        ValueError: If value is not a flag field.
    """
    match value.field:
        case RoomField.MOB_FLAGS:
            room.mob_flags = modify_flags(room.mob_flags, value.value, mode)
        case RoomField.LOAD_FLAGS:
            room.load_flags = modify_flags(room.load_flags, value.value, mode)
        case _:
            raise ValueError(f"{value.field.name} is not a flag field")


def set_exit_field(ex: Exit, value: ExitFieldValue) -> None:
    match value.field:
        case ExitField.DOOR_NAME:
            ex.door_name = value.value
        case ExitField.EXIT_FLAGS:
            ex.exit_flags = value.value
        case ExitField.DOOR_FLAGS:
            ex.door_flags = value.value
        case _:
            raise UnhandledFieldError(f"No setter for exit field {value.field}")


def modify_exit_flags(ex: Exit, value: ExitFieldValue, mode: FlagModifyMode) -> None:
    """Set, clear or toggle exit/door flag bits.

    Raises:
        ValueError: If value is a door name.
    """
    match value.field:
        case ExitField.EXIT_FLAGS:
            ex.exit_flags = modify_flags(ex.exit_flags, value.value, mode)
        case ExitField.DOOR_FLAGS:
            ex.door_flags = modify_flags(ex.door_flags, value.value, mode)
        case _:
            raise ValueError(f"{value.field.name} is not a flag field")


def merge_event(room: Room, event: ParseEvent) -> None:
    """Merge freshly observed properties into room.

    Empty strings and a missing terrain leave the stored values alone; every
    exit the event reports gets its EXIT flag.
    """
    if event.name:
        room.name = event.name
    if event.description:
        room.description = event.description
    if event.terrain is not None:
        room.terrain = event.terrain
    for direction in event.exits:
        if direction in room.exits:
            room.exits[direction].exit_flags |= ExitFlags.EXIT


def detach_exits(room: Room, other_id: RoomId) -> None:
    """Drop every exit reference from room to other_id, in both directions.

    Exits left without any outgoing target lose their EXIT flag.
    """
    for ex in room.exits.values():
        if other_id in ex.outgoing:
            ex.outgoing.discard(other_id)
            if not ex.outgoing:
                ex.exit_flags &= ~ExitFlags.EXIT
        ex.incoming.discard(other_id)
