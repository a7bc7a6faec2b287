"""RoomGrid: spatial room store and deferred-action engine for map editors.

Usage:
    from roomgrid import MapData, RoomSelection, SingleRoomAction, Remove
    from roomgrid import Coordinate, ParseEvent

    mapdata = MapData()
    hall = mapdata.create_room(ParseEvent(name="Hall"), Coordinate(0, 0, 0))

    selection = RoomSelection("editor")
    mapdata.get_room_by_id(hall, selection)
    mapdata.execute(SingleRoomAction(Remove(), hall), selection)
"""

__version__ = "0.1.0"

# Actions
from roomgrid.actions import (
    AddExit,
    MakePermanent,
    MapAction,
    ModifyExitFlags,
    ModifyRoomFlags,
    Remove,
    RemoveExit,
    RoomMutation,
    SingleRoomAction,
    Update,
    UpdateExitField,
    UpdateRoomField,
)

# Configuration
from roomgrid.config import RoomGridSettings

# Core primitives
from roomgrid.core import (
    ORIGIN,
    CommandId,
    Coordinate,
    CoordinateBox,
    Copy,
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
    RoomId,
    TerrainType,
    UnhandledFieldError,
)

# Logging
from roomgrid.logging import configure_from_settings, configure_logging, get_logger

# Facade
from roomgrid.mapdata import MapData, MapFrontend, RoomDrawer, RoomRecipient, RoomSelection

# Storage
from roomgrid.storage import SearchExhaustedError, SpatialIndex, SpiralSearch

__all__ = [
    "__version__",
    # Core
    "Coordinate",
    "CoordinateBox",
    "ORIGIN",
    "RoomId",
    "Room",
    "Exit",
    "ParseEvent",
    "Copy",
    "ExitDirection",
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
    # Storage
    "SpatialIndex",
    "SpiralSearch",
    "SearchExhaustedError",
    # Actions
    "MapAction",
    "SingleRoomAction",
    "AddExit",
    "RemoveExit",
    "RoomMutation",
    "MakePermanent",
    "Update",
    "ModifyRoomFlags",
    "UpdateRoomField",
    "ModifyExitFlags",
    "UpdateExitField",
    "Remove",
    # Facade
    "MapFrontend",
    "MapData",
    "RoomSelection",
    "RoomRecipient",
    "RoomDrawer",
    # Config and logging
    "RoomGridSettings",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
