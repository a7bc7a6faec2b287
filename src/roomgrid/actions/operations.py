"""Dispatch of room mutations.

apply_mutation() and insert_affected() are the two total functions over the
RoomMutation kinds. Both run with the frontend lock held.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roomgrid.actions.models import (
    MakePermanent,
    ModifyExitFlags,
    ModifyRoomFlags,
    Remove,
    RoomMutation,
    Update,
    UpdateExitField,
    UpdateRoomField,
)
from roomgrid.core.identity import RoomId
from roomgrid.core.room import (
    UnhandledFieldError,
    detach_exits,
    merge_event,
    modify_exit_flags,
    modify_room_flags,
    set_exit_field,
    set_room_field,
)
from roomgrid.logging import get_logger

if TYPE_CHECKING:
    from roomgrid.actions.protocol import FrontendAccess

logger = get_logger(__name__)


def apply_mutation(frontend: FrontendAccess, mutation: RoomMutation, room_id: RoomId) -> bool:
    """Apply mutation to the room with room_id.

    A room that no longer exists is skipped: concurrent removal between
    scheduling and execution is expected, not an error.

    Args:
        frontend: Structure accessors of the owning frontend.
        mutation: What to change.
        room_id: Which room to change.

    Returns:
        True if the room was found and mutated.

    Raises:
        UnhandledFieldError: If mutation is not a known kind.
    """
    room = frontend.room_index().get(room_id)
    if room is None:
        logger.debug("stale_action_target", mutation=type(mutation).__name__, room=room_id)
        return False

    match mutation:
        case MakePermanent():
            room.temporary = False
        case Update(event=None):
            pass
        case Update(event=event):
            merge_event(room, event)
            frontend.parse_tree().home(room, frontend.room_homes())
        case ModifyRoomFlags(value=value, mode=mode):
            modify_room_flags(room, value, mode)
        case UpdateRoomField(value=value):
            set_room_field(room, value)
            frontend.parse_tree().home(room, frontend.room_homes())
        case ModifyExitFlags(value=value, direction=direction, mode=mode):
            modify_exit_flags(room.exit(direction), value, mode)
        case UpdateExitField(value=value, direction=direction):
            set_exit_field(room.exit(direction), value)
        case Remove():
            _remove_room(frontend, room_id)
        case _:
            raise UnhandledFieldError(f"Unknown room mutation: {mutation!r}")
    return True


def insert_affected(
    frontend: FrontendAccess,
    mutation: RoomMutation,
    room_id: RoomId,
    affected: set[RoomId],
) -> None:
    """Add every room whose identity or exits mutation touches to affected.

    Removing a room also invalidates the exit tables of its neighbours, so
    they count as affected too.
    """
    affected.add(room_id)
    match mutation:
        case Remove():
            room = frontend.room_index().get(room_id)
            if room is not None:
                affected |= room.neighbours()
        case _:
            pass


def destroys_room(mutation: RoomMutation) -> bool:
    """Whether mutation deletes its target room."""
    return isinstance(mutation, Remove)


def _remove_room(frontend: FrontendAccess, room_id: RoomId) -> None:
    """Delete a room and every structure entry that refers to it.

    Order matters only in that RoomIndex goes last: until then the room is
    still resolvable for the neighbour sweep.
    """
    rooms = frontend.room_index()
    room = rooms.get(room_id)
    if room is None:
        return

    for other_id in room.neighbours():
        other = rooms.get(other_id)
        if other is not None:
            detach_exits(other, room_id)

    spatial = frontend.map()
    if spatial.get(room.position) == room_id:
        spatial.remove(room.position)

    frontend.parse_tree().evict(room_id, frontend.room_homes())
    frontend.lock_table().forget(room_id)
    rooms.remove(room_id)
    logger.debug("room_removed", room=room_id)
