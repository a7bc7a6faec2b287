"""Per-room advisory lock table.

A lock records that some holder (a selection, a search recipient) depends on
a room staying addressable. Locks never block anybody; the frontend consults
them before destroying a room and re-establishes them around action execution.
"""

from __future__ import annotations

from collections.abc import Hashable

from roomgrid.core.identity import RoomId


class LockTable:
    """Mapping RoomId -> set of holders. Empty entries are pruned."""

    def __init__(self) -> None:
        self._locks: dict[RoomId, set[Hashable]] = {}

    def lock(self, holder: Hashable, room_id: RoomId) -> None:
        """Register holder as depending on room_id."""
        self._locks.setdefault(room_id, set()).add(holder)

    def unlock(self, holder: Hashable, room_id: RoomId) -> bool:
        """Release holder's lock on room_id.

        Returns:
            True if holder was holding the room.
        """
        holders = self._locks.get(room_id)
        if holders is None or holder not in holders:
            return False
        holders.discard(holder)
        if not holders:
            del self._locks[room_id]
        return True

    def is_locked(self, room_id: RoomId) -> bool:
        return room_id in self._locks

    def holders(self, room_id: RoomId) -> frozenset[Hashable]:
        return frozenset(self._locks.get(room_id, ()))

    def held_by(self, holder: Hashable) -> frozenset[RoomId]:
        """Every room holder currently locks."""
        return frozenset(room_id for room_id, holders in self._locks.items() if holder in holders)

    def forget(self, room_id: RoomId) -> None:
        """Drop the entry for a room that is being destroyed."""
        self._locks.pop(room_id, None)

    def clear(self) -> None:
        self._locks.clear()

    def __len__(self) -> int:
        return len(self._locks)
