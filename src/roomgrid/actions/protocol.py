"""Frontend capability handed to actions when they are scheduled.

These accessors are the only channels through which an action may reach
shared map state. Actions must not keep what they return beyond their own
exec() call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from roomgrid.storage import LockTable, ParseTree, RoomHomes, RoomIndex, SpatialIndex


class FrontendAccess(Protocol):
    """Structure accessors exposed by MapFrontend to scheduled actions."""

    def map(self) -> SpatialIndex:
        """The coordinate -> room spatial index."""
        ...

    def parse_tree(self) -> ParseTree:
        """Rooms grouped by parse key."""
        ...

    def room_index(self) -> RoomIndex:
        """The canonical id -> room table."""
        ...

    def room_homes(self) -> RoomHomes:
        """Room -> parse-tree collection it lives in."""
        ...

    def lock_table(self) -> LockTable:
        """Per-room advisory locks."""
        ...
