"""Core functionalities: stateless value types and primitives.

Architecture Note:
    core/ contains pure value types and mutation helpers with no runtime state
    of their own. For stateful services, see storage/, actions/ and mapdata/.
"""

from roomgrid.core.coordinate import ORIGIN, UNIT, Coordinate, CoordinateBox
from roomgrid.core.identity import RoomId
from roomgrid.core.room import (
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
)
from roomgrid.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Coordinates
    "Coordinate",
    "CoordinateBox",
    "ORIGIN",
    "UNIT",
    # Identity
    "RoomId",
    # Rooms
    "Room",
    "Exit",
    "ParseEvent",
    "ExitDirection",
    "ALL_EXITS7",
    "ALL_EXITS_NESWUD",
    "CommandId",
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
    "UnhandledFieldError",
]
