"""Map data facade: the frontend that owns the map and the query surface over it."""

from roomgrid.mapdata.draw import DrawStream
from roomgrid.mapdata.frontend import MapFrontend
from roomgrid.mapdata.mapdata import DEFAULT_DOOR_NAME, MapData
from roomgrid.mapdata.protocol import RoomDrawer, RoomFilter, RoomRecipient
from roomgrid.mapdata.selection import RoomSelection

__all__ = [
    # Facade
    "MapFrontend",
    "MapData",
    "DEFAULT_DOOR_NAME",
    # Selections and drawing
    "RoomSelection",
    "DrawStream",
    # Protocols
    "RoomRecipient",
    "RoomDrawer",
    "RoomFilter",
]
