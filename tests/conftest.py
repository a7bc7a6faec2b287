"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from roomgrid import (
    AddExit,
    Coordinate,
    ExitDirection,
    MapData,
    ParseEvent,
    RoomGridSettings,
    RoomId,
    RoomSelection,
)
from roomgrid.storage import RoomIndex, SpatialIndex


@pytest.fixture
def settings():
    """Settings with a small search bound so exhaustion is cheap to reach."""
    return RoomGridSettings(max_search_radius=4)


@pytest.fixture
def mapdata(settings):
    """Fresh MapData instance."""
    return MapData(settings)


@pytest.fixture
def selection():
    return RoomSelection("test")


@pytest.fixture
def rooms():
    """Fresh RoomIndex."""
    return RoomIndex()


@pytest.fixture
def spatial(rooms):
    """SpatialIndex resolving through the rooms fixture."""
    return SpatialIndex(rooms)


@pytest.fixture
def link(mapdata):
    """Connect source -> target (and the reverse exit) through scheduled actions."""

    def _link(source: RoomId, target: RoomId, direction: ExitDirection) -> None:
        assert mapdata.schedule_action(AddExit(source, target, direction))
        assert mapdata.schedule_action(AddExit(target, source, direction.opposite))

    return _link


@pytest.fixture
def corridor(mapdata, link):
    """Three rooms west to east at y=0, linked both ways.

    Returns:
        (west, middle, east) room ids.
    """
    west = mapdata.create_room(ParseEvent(name="West"), Coordinate(0, 0, 0))
    middle = mapdata.create_room(ParseEvent(name="Middle"), Coordinate(1, 0, 0))
    east = mapdata.create_room(ParseEvent(name="East"), Coordinate(2, 0, 0))
    link(west, middle, ExitDirection.EAST)
    link(middle, east, ExitDirection.EAST)
    return west, middle, east
