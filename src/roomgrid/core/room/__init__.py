"""Room functionality: room/exit models, field kinds and mutation helpers."""

from roomgrid.core.room.models import (
    ALL_EXITS7,
    ALL_EXITS_NESWUD,
    CommandId,
    DoorFlags,
    Exit,
    ExitDirection,
    ExitField,
    ExitFieldValue,
    ExitFlags,
    FlagModifyMode,
    LightType,
    LoadFlags,
    MobFlags,
    ParseEvent,
    Room,
    RoomField,
    RoomFieldValue,
    TerrainType,
    UnhandledFieldError,
    direction_of,
    is_direction_neswud,
    modify_flags,
)
from roomgrid.core.room.operations import (
    detach_exits,
    merge_event,
    modify_exit_flags,
    modify_room_flags,
    set_exit_field,
    set_room_field,
)

__all__ = [
    # Models
    "Room",
    "Exit",
    "ParseEvent",
    # Directions and commands
    "ExitDirection",
    "ALL_EXITS7",
    "ALL_EXITS_NESWUD",
    "CommandId",
    "direction_of",
    "is_direction_neswud",
    # Flags and field kinds
    "ExitFlags",
    "DoorFlags",
    "MobFlags",
    "LoadFlags",
    "TerrainType",
    "LightType",
    "FlagModifyMode",
    "RoomField",
    "RoomFieldValue",
    "ExitField",
    "ExitFieldValue",
    "modify_flags",
    # Operations
    "set_room_field",
    "modify_room_flags",
    "set_exit_field",
    "modify_exit_flags",
    "merge_event",
    "detach_exits",
    # Errors
    "UnhandledFieldError",
]
