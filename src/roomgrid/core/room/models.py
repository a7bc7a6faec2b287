"""Room, exit and field models.

Rooms are plain mutable dataclasses owned by RoomIndex. Everything else in
the package refers to them by RoomId and resolves them at time of use.

Usage:
    room = Room(id=RoomId(1), name="Market Square")
    room.exit(ExitDirection.NORTH).outgoing.add(RoomId(2))
    room.exit(ExitDirection.NORTH).exit_flags |= ExitFlags.EXIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag, auto
from typing import Any

from roomgrid.core.coordinate import ORIGIN, Coordinate
from roomgrid.core.identity import RoomId


class UnhandledFieldError(RuntimeError):
    """Raised when a field kind reaches code that has no branch for it.

    Indicates the field enumeration and its handlers have drifted apart.
    """

    pass


class ExitDirection(IntEnum):
    """Exit slots of a room. Values below UNKNOWN are real compass exits."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    UP = 4
    DOWN = 5
    UNKNOWN = 6
    NONE = 7

    @property
    def opposite(self) -> ExitDirection:
        return _OPPOSITES[self]

    @property
    def is_neswud(self) -> bool:
        return self < ExitDirection.UNKNOWN


_OPPOSITES = {
    ExitDirection.NORTH: ExitDirection.SOUTH,
    ExitDirection.SOUTH: ExitDirection.NORTH,
    ExitDirection.EAST: ExitDirection.WEST,
    ExitDirection.WEST: ExitDirection.EAST,
    ExitDirection.UP: ExitDirection.DOWN,
    ExitDirection.DOWN: ExitDirection.UP,
    ExitDirection.UNKNOWN: ExitDirection.UNKNOWN,
    ExitDirection.NONE: ExitDirection.NONE,
}

ALL_EXITS_NESWUD: tuple[ExitDirection, ...] = tuple(d for d in ExitDirection if d.is_neswud)
ALL_EXITS7: tuple[ExitDirection, ...] = (*ALL_EXITS_NESWUD, ExitDirection.UNKNOWN)


class CommandId(IntEnum):
    """Movement-queue commands, as produced by the (external) parser."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    UP = 4
    DOWN = 5
    UNKNOWN = 6
    LOOK = 7
    FLEE = 8
    SCOUT = 9
    NONE = 10


def is_direction_neswud(command: CommandId) -> bool:
    """Check whether a command moves along one of the six compass exits."""
    return command <= CommandId.DOWN


def direction_of(command: CommandId) -> ExitDirection:
    """Map a movement command to its exit slot.

    Raises:
        ValueError: If the command is not a compass movement.
    """
    if not is_direction_neswud(command):
        raise ValueError(f"{command.name} is not a direction")
    return ExitDirection(command.value)


class ExitFlags(IntFlag):
    EXIT = auto()
    DOOR = auto()
    ROAD = auto()
    CLIMB = auto()
    RANDOM = auto()
    SPECIAL = auto()
    NO_MATCH = auto()


class DoorFlags(IntFlag):
    HIDDEN = auto()
    NEED_KEY = auto()
    NO_BLOCK = auto()
    NO_BREAK = auto()
    NO_PICK = auto()
    DELAYED = auto()


class MobFlags(IntFlag):
    RENT = auto()
    SHOP = auto()
    GUILD = auto()
    SCOUT_GUILD = auto()
    QUEST_MOB = auto()
    AGGRESSIVE_MOB = auto()


class LoadFlags(IntFlag):
    TREASURE = auto()
    ARMOUR = auto()
    WEAPON = auto()
    WATER = auto()
    FOOD = auto()
    HERB = auto()
    KEY = auto()


class TerrainType(Enum):
    UNDEFINED = auto()
    INDOORS = auto()
    CITY = auto()
    FIELD = auto()
    FOREST = auto()
    HILLS = auto()
    MOUNTAINS = auto()
    SHALLOW = auto()
    WATER = auto()
    UNDERWATER = auto()
    ROAD = auto()
    CAVERN = auto()


class LightType(Enum):
    UNDEFINED = auto()
    DARK = auto()
    LIT = auto()


class FlagModifyMode(Enum):
    SET = auto()
    UNSET = auto()
    TOGGLE = auto()


def modify_flags[F: IntFlag](current: F, flags: F, mode: FlagModifyMode) -> F:
    """Apply flags to current according to mode.

    Args:
        current: Existing flag value.
        flags: Bits to set, clear or flip.
        mode: How to combine them.

    Returns:
        New flag value of the same type.
    """
    match mode:
        case FlagModifyMode.SET:
            return current | flags
        case FlagModifyMode.UNSET:
            return current & ~flags
        case FlagModifyMode.TOGGLE:
            return current ^ flags
    raise UnhandledFieldError(f"Unknown flag mode: {mode}")


@dataclass
class Exit:
    """One directional exit slot of a room."""

    outgoing: set[RoomId] = field(default_factory=set)
    incoming: set[RoomId] = field(default_factory=set)
    door_name: str = ""
    exit_flags: ExitFlags = ExitFlags(0)
    door_flags: DoorFlags = DoorFlags(0)

    def is_exit(self) -> bool:
        return ExitFlags.EXIT in self.exit_flags

    def out_is_unique(self) -> bool:
        """True when the exit leads to exactly one room."""
        return len(self.outgoing) == 1

    def out_first(self) -> RoomId | None:
        """Smallest outgoing target, or None when there is none."""
        return min(self.outgoing) if self.outgoing else None


def _default_exits() -> dict[ExitDirection, Exit]:
    return {direction: Exit() for direction in ALL_EXITS7}


@dataclass
class Room:
    """A node of the map: identity, position, descriptive fields and exits."""

    id: RoomId
    position: Coordinate = ORIGIN
    name: str = ""
    description: str = ""
    note: str = ""
    terrain: TerrainType = TerrainType.UNDEFINED
    light: LightType = LightType.UNDEFINED
    mob_flags: MobFlags = MobFlags(0)
    load_flags: LoadFlags = LoadFlags(0)
    exits: dict[ExitDirection, Exit] = field(default_factory=_default_exits)
    temporary: bool = False

    def exit(self, direction: ExitDirection) -> Exit:
        """Exit slot for direction.

        Raises:
            KeyError: If direction is NONE (rooms have no such slot).
        """
        return self.exits[direction]

    def neighbours(self) -> set[RoomId]:
        """Every room reachable from, or leading into, this room."""
        result: set[RoomId] = set()
        for ex in self.exits.values():
            result |= ex.outgoing
            result |= ex.incoming
        result.discard(self.id)
        return result


class RoomField(Enum):
    NAME = auto()
    DESC = auto()
    NOTE = auto()
    MOB_FLAGS = auto()
    LOAD_FLAGS = auto()
    TERRAIN_TYPE = auto()
    LIGHT_TYPE = auto()


class ExitField(Enum):
    DOOR_NAME = auto()
    EXIT_FLAGS = auto()
    DOOR_FLAGS = auto()


@dataclass(frozen=True, slots=True)
class RoomFieldValue:
    """A room field kind paired with a value of that kind."""

    field: RoomField
    value: Any

    @property
    def is_flags(self) -> bool:
        return self.field in (RoomField.MOB_FLAGS, RoomField.LOAD_FLAGS)


@dataclass(frozen=True, slots=True)
class ExitFieldValue:
    """An exit field kind paired with a value of that kind."""

    field: ExitField
    value: Any


@dataclass(frozen=True, slots=True)
class ParseEvent:
    """Room properties freshly observed by the (external) game-text parser."""

    name: str = ""
    description: str = ""
    terrain: TerrainType | None = None
    exits: frozenset[ExitDirection] = frozenset()

    @property
    def key(self) -> tuple[str, str]:
        """Parse-tree key grouping rooms that look identical."""
        return (self.name, self.description)
