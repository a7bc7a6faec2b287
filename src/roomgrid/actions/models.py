"""Room mutation kinds.

Each mutation is an immutable description of one change to a single room.
The set is closed: actions.operations dispatches over it with one match, so
adding a kind means adding a case there (and the type checker will point at
the gap through the RoomMutation union).

Usage:
    SingleRoomAction(MakePermanent(), room_id)
    SingleRoomAction(ModifyRoomFlags(RoomFieldValue(RoomField.MOB_FLAGS, MobFlags.SHOP)), room_id)
"""

from __future__ import annotations

from dataclasses import dataclass

from roomgrid.core.room import (
    ExitDirection,
    ExitFieldValue,
    FlagModifyMode,
    ParseEvent,
    RoomFieldValue,
)


@dataclass(frozen=True, slots=True)
class MakePermanent:
    """Clear the room's temporary classification."""


@dataclass(frozen=True, slots=True)
class Update:
    """Merge freshly parsed properties into the room. No event = no-op."""

    event: ParseEvent | None = None


@dataclass(frozen=True, slots=True)
class ModifyRoomFlags:
    """Set, clear or toggle mob/load flag bits."""

    value: RoomFieldValue
    mode: FlagModifyMode = FlagModifyMode.TOGGLE


@dataclass(frozen=True, slots=True)
class UpdateRoomField:
    """Overwrite one room field."""

    value: RoomFieldValue


@dataclass(frozen=True, slots=True)
class ModifyExitFlags:
    """Set, clear or toggle exit/door flag bits on one exit."""

    value: ExitFieldValue
    direction: ExitDirection
    mode: FlagModifyMode = FlagModifyMode.TOGGLE


@dataclass(frozen=True, slots=True)
class UpdateExitField:
    """Overwrite one field of one exit."""

    value: ExitFieldValue
    direction: ExitDirection


@dataclass(frozen=True, slots=True)
class Remove:
    """Delete the room and every reference to it."""


RoomMutation = (
    MakePermanent
    | Update
    | ModifyRoomFlags
    | UpdateRoomField
    | ModifyExitFlags
    | UpdateExitField
    | Remove
)
