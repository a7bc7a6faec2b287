"""Deferred map actions.

An action is a single-use command: constructed by a caller, bound to a
frontend with schedule(), executed exactly once by that frontend under its
lock, then discarded.

Usage:
    action = SingleRoomAction(MakePermanent(), room_id)
    mapdata.execute(action, selection)

    mapdata.execute(AddExit(hall, kitchen, ExitDirection.EAST), selection)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from roomgrid.actions.models import RoomMutation
from roomgrid.actions.operations import apply_mutation, destroys_room, insert_affected
from roomgrid.core.identity import RoomId
from roomgrid.core.room import ExitDirection, ExitFlags, Room
from roomgrid.logging import get_logger

if TYPE_CHECKING:
    from roomgrid.actions.protocol import FrontendAccess
    from roomgrid.storage import RoomIndex

logger = get_logger(__name__)


class FrontendAccessor:
    """Holds the frontend an action was scheduled against."""

    _frontend: FrontendAccess | None = None

    def set_frontend(self, frontend: FrontendAccess) -> None:
        self._frontend = frontend

    @property
    def frontend(self) -> FrontendAccess:
        """The bound frontend.

        Raises:
            RuntimeError: If the action was never scheduled.
        """
        if self._frontend is None:
            raise RuntimeError(f"{type(self).__name__} used before schedule()")
        return self._frontend

    def _room(self, room_id: RoomId) -> Room | None:
        return self._room_index().get(room_id)

    def _room_index(self) -> RoomIndex:
        return self.frontend.room_index()


class MapAction(ABC, FrontendAccessor):
    """Base of every action the frontend can execute."""

    def schedule(self, frontend: FrontendAccess) -> None:
        """Bind to frontend. Performs no mutation; required before exec()."""
        self.set_frontend(frontend)

    @abstractmethod
    def exec(self) -> None:
        """Perform the mutation. Called by the frontend with its lock held."""
        ...

    @abstractmethod
    def affected_rooms(self) -> frozenset[RoomId]:
        """Rooms whose identity or exit table this action touches."""
        ...

    def destroyed_rooms(self) -> frozenset[RoomId]:
        """Rooms this action deletes. None by default."""
        return frozenset()


class SingleRoomAction(MapAction):
    """Applies one RoomMutation to one room.

    Args:
        mutation: What to change.
        room_id: Which room to change.
    """

    def __init__(self, mutation: RoomMutation, room_id: RoomId):
        self.mutation = mutation
        self.room_id = room_id
        self._affected: frozenset[RoomId] | None = None

    def schedule(self, frontend: FrontendAccess) -> None:
        super().schedule(frontend)
        self._affected = None

    def pre_exec(self, room_id: RoomId) -> None:
        """Hook run right before the mutation. No-op by default."""
        pass

    def exec(self) -> None:
        self.pre_exec(self.room_id)
        apply_mutation(self.frontend, self.mutation, self.room_id)

    def affected_rooms(self) -> frozenset[RoomId]:
        """Target room, plus its neighbours for a removal.

        Computed on first use after schedule() so that it reflects the exits
        in place at execution time.
        """
        if self._affected is None:
            affected: set[RoomId] = set()
            insert_affected(self.frontend, self.mutation, self.room_id, affected)
            self._affected = frozenset(affected)
        return self._affected

    def destroyed_rooms(self) -> frozenset[RoomId]:
        if destroys_room(self.mutation):
            return frozenset({self.room_id})
        return frozenset()

    def __repr__(self) -> str:
        return f"SingleRoomAction({self.mutation!r}, room={self.room_id})"


class _ExitAction(MapAction):
    """Shared shape of the two-endpoint exit actions.

    Raises:
        ValueError: If direction is NONE (rooms have no such exit slot).
    """

    def __init__(self, source: RoomId, target: RoomId, direction: ExitDirection):
        if direction is ExitDirection.NONE:
            raise ValueError(f"{type(self).__name__} needs a real exit slot, got NONE")
        self.source = source
        self.target = target
        self.direction = direction

    def exec(self) -> None:
        source = self._room(self.source)
        target = self._room(self.target)
        if source is None or target is None:
            logger.debug(
                "stale_action_target",
                action=type(self).__name__,
                source=self.source,
                target=self.target,
            )
            return
        self.try_exec(source, target)

    @abstractmethod
    def try_exec(self, source: Room, target: Room) -> None:
        """Mutate both endpoints, which are known to be live."""
        ...

    def affected_rooms(self) -> frozenset[RoomId]:
        return frozenset({self.source, self.target})

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self.source}, target={self.target}, "
            f"direction={self.direction.name})"
        )


class AddExit(_ExitAction):
    """Add an exit from source to target in direction (and its incoming side)."""

    def try_exec(self, source: Room, target: Room) -> None:
        out = source.exit(self.direction)
        out.outgoing.add(target.id)
        out.exit_flags |= ExitFlags.EXIT
        target.exit(self.direction.opposite).incoming.add(source.id)


class RemoveExit(_ExitAction):
    """Remove the exit from source to target in direction.

    The exit loses its EXIT flag once it leads nowhere.
    """

    def try_exec(self, source: Room, target: Room) -> None:
        out = source.exit(self.direction)
        out.outgoing.discard(target.id)
        if not out.outgoing:
            out.exit_flags &= ~ExitFlags.EXIT
        target.exit(self.direction.opposite).incoming.discard(source.id)
