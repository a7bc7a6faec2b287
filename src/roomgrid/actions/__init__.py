"""Deferred-action framework: schedulable, single-use map mutations."""

from roomgrid.actions.map_action import (
    AddExit,
    FrontendAccessor,
    MapAction,
    RemoveExit,
    SingleRoomAction,
)
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
from roomgrid.actions.operations import apply_mutation, destroys_room, insert_affected
from roomgrid.actions.protocol import FrontendAccess

__all__ = [
    # Actions
    "MapAction",
    "SingleRoomAction",
    "AddExit",
    "RemoveExit",
    "FrontendAccessor",
    # Mutations
    "RoomMutation",
    "MakePermanent",
    "Update",
    "ModifyRoomFlags",
    "UpdateRoomField",
    "ModifyExitFlags",
    "UpdateExitField",
    "Remove",
    # Operations
    "apply_mutation",
    "insert_affected",
    "destroys_room",
    # Protocols
    "FrontendAccess",
]
