"""Parse tree: rooms grouped by how they look to the game-text parser.

Each group (RoomCollection) holds the ids of rooms sharing a parse key, that
is the same name and description. RoomHomes records, per room, which
collection it currently lives in so that Update and Remove can move or evict
it without searching the tree.
"""

from __future__ import annotations

from collections.abc import Iterator

from roomgrid.core.identity import RoomId
from roomgrid.core.room import ParseEvent, Room

ParseKey = tuple[str, str]


class RoomCollection:
    """Ids of rooms that share one parse key."""

    def __init__(self, key: ParseKey):
        self.key = key
        self._ids: set[RoomId] = set()

    def add(self, room_id: RoomId) -> None:
        self._ids.add(room_id)

    def discard(self, room_id: RoomId) -> None:
        self._ids.discard(room_id)

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._ids

    def __iter__(self) -> Iterator[RoomId]:
        return iter(sorted(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"RoomCollection(key={self.key!r}, size={len(self._ids)})"


RoomHomes = dict[RoomId, RoomCollection]
"""Room -> the collection it currently lives in."""


class ParseTree:
    """Parse key -> RoomCollection. Empty collections are dropped."""

    def __init__(self) -> None:
        self._collections: dict[ParseKey, RoomCollection] = {}

    def home(self, room: Room, homes: RoomHomes) -> RoomCollection:
        """(Re)home room under the key of its current name and description.

        Args:
            room: Room to file.
            homes: RoomHomes mapping to keep in sync.

        Returns:
            The collection the room now lives in.
        """
        self.evict(room.id, homes)
        key = (room.name, room.description)
        collection = self._collections.get(key)
        if collection is None:
            collection = self._collections[key] = RoomCollection(key)
        collection.add(room.id)
        homes[room.id] = collection
        return collection

    def evict(self, room_id: RoomId, homes: RoomHomes) -> None:
        """Remove room_id from its collection, if it has one."""
        collection = homes.pop(room_id, None)
        if collection is None:
            return
        collection.discard(room_id)
        if not collection:
            self._collections.pop(collection.key, None)

    def lookup(self, event: ParseEvent) -> frozenset[RoomId]:
        """Ids of rooms whose name and description match event exactly."""
        collection = self._collections.get(event.key)
        if collection is None:
            return frozenset()
        return frozenset(collection)

    def clear(self) -> None:
        self._collections.clear()

    def __len__(self) -> int:
        return len(self._collections)
