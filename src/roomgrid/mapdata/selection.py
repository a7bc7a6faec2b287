"""Caller-held room selections.

A selection is a named set of RoomIds that registers itself as lock holder
for every room it contains. Selections compare and hash by identity, which is
what the lock table needs to tell holders apart.

Usage:
    selection = RoomSelection("drag")
    mapdata.get_room_for(Coordinate(0, 0, 0), selection)
    mapdata.execute(SingleRoomAction(Remove(), room_id), selection)
    mapdata.release_selection(selection)
"""

from __future__ import annotations

from collections.abc import Iterator

from roomgrid.core.identity import RoomId


class RoomSelection:
    """Ordered set of selected RoomIds.

    Membership is maintained by the frontend together with the matching
    lock-table entries; callers only read it.

    Args:
        name: Label used in logs.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._ids: dict[RoomId, None] = {}

    def add(self, room_id: RoomId) -> None:
        self._ids[room_id] = None

    def discard(self, room_id: RoomId) -> None:
        self._ids.pop(room_id, None)

    def clear(self) -> None:
        self._ids.clear()

    def ids(self) -> list[RoomId]:
        return list(self._ids)

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._ids

    def __iter__(self) -> Iterator[RoomId]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"RoomSelection(name={self.name!r}, size={len(self._ids)})"
