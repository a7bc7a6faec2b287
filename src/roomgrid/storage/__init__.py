"""Storage: the spatial index, room ownership and bookkeeping tables."""

from roomgrid.storage.allocator import RoomIdAllocator
from roomgrid.storage.locks import LockTable
from roomgrid.storage.parse_tree import ParseTree, RoomCollection, RoomHomes
from roomgrid.storage.protocol import RoomFactory, RoomLookup, RoomVisitor
from roomgrid.storage.room_index import RoomIndex
from roomgrid.storage.search import (
    SearchExhaustedError,
    SpiralSearch,
    nearest_offsets,
    search_sign,
)
from roomgrid.storage.spatial import SpatialIndex

__all__ = [
    # Stores
    "SpatialIndex",
    "RoomIndex",
    "RoomIdAllocator",
    "LockTable",
    "ParseTree",
    "RoomCollection",
    "RoomHomes",
    # Search
    "SpiralSearch",
    "search_sign",
    "nearest_offsets",
    "SearchExhaustedError",
    # Protocols
    "RoomFactory",
    "RoomVisitor",
    "RoomLookup",
]
