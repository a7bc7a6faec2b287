"""Room identity models.

Usage:
    room_id = RoomId(42)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class RoomId:
    """Stable room identifier.

    Ids are handed out monotonically by RoomIdAllocator and never reused, so a
    stale id can only ever miss, never alias a newer room.
    """

    value: int

    def __str__(self) -> str:
        return str(self.value)
