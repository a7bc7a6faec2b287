"""Tests for the MapData query and mutation-request surface."""

import pytest

from roomgrid import (
    AddExit,
    CommandId,
    Coordinate,
    DoorFlags,
    ExitDirection,
    ExitField,
    ExitFieldValue,
    LightType,
    MapData,
    MobFlags,
    ParseEvent,
    RoomField,
    RoomFieldValue,
    RoomGridSettings,
    RoomSelection,
    SearchExhaustedError,
    UnhandledFieldError,
)
from roomgrid.mapdata import DEFAULT_DOOR_NAME


class CollectingDrawer:
    def __init__(self):
        self.drawn = []

    def draw_room(self, room, locked):
        self.drawn.append((room, locked))


class CollectingRecipient:
    def __init__(self):
        self.received = []

    def receive_room(self, frontend, room):
        self.received.append(room)


# Room creation


def test_create_room_is_temporary_and_placed(mapdata):
    room_id = mapdata.create_room(ParseEvent(name="Camp"), Coordinate(2, 2, 0))

    room = mapdata.get_room(Coordinate(2, 2, 0))
    assert room.id == room_id
    assert room.temporary
    assert room.name == "Camp"
    assert mapdata.find_rooms(ParseEvent(name="Camp")) == {room_id}


def test_create_room_avoids_occupied_target(mapdata):
    first = mapdata.create_room()
    second = mapdata.create_room()

    assert mapdata.room_index().get(second).position.chebyshev() == 1
    assert mapdata.get_room(Coordinate(0, 0, 0)).id == first


def test_create_room_gives_up_at_search_bound(mapdata, settings):
    r = settings.max_search_radius
    mapdata.fill_area(Coordinate(-r, -r, -r), Coordinate(r, r, r))
    count = mapdata.room_count()

    with pytest.raises(SearchExhaustedError):
        mapdata.create_room()
    assert mapdata.room_count() == count


def test_fill_area_returns_new_ids(mapdata):
    existing = mapdata.create_room()

    created = mapdata.fill_area(Coordinate(0, 0, 0), Coordinate(1, 1, 0))

    assert len(created) == 3
    assert existing not in created
    assert mapdata.fill_area(Coordinate(0, 0, 0), Coordinate(1, 1, 0)) == []


def test_settings_default_from_environment(monkeypatch):
    monkeypatch.setenv("ROOMGRID_MAX_SEARCH_RADIUS", "7")

    assert MapData().settings.max_search_radius == 7


# Room queries


def test_get_room_returns_a_copy(mapdata):
    mapdata.create_room(ParseEvent(name="Original"))

    copy = mapdata.get_room(Coordinate(0, 0, 0))
    copy.name = "Changed"
    copy.exit(ExitDirection.NORTH).outgoing.add(copy.id)

    fresh = mapdata.get_room(Coordinate(0, 0, 0))
    assert fresh.name == "Original"
    assert not fresh.exit(ExitDirection.NORTH).outgoing


def test_get_room_for_free_cell(mapdata, selection):
    assert mapdata.get_room(Coordinate(9, 9, 9)) is None
    assert mapdata.get_room_for(Coordinate(9, 9, 9), selection) is None
    assert len(selection) == 0


def test_get_room_for_selects_and_locks(mapdata, selection):
    room_id = mapdata.create_room()

    room = mapdata.get_room_for(Coordinate(0, 0, 0), selection)

    assert room.id == room_id
    assert room_id in selection
    assert mapdata.lock_table().holders(room_id) == {selection}


def test_lock_room_requires_a_live_room(mapdata):
    holder = object()
    room_id = mapdata.create_room()

    assert mapdata.lock_room(holder, room_id)
    mapdata.clear()
    assert not mapdata.lock_room(holder, room_id)


def test_get_room_flag(mapdata):
    mapdata.create_room()
    pos = Coordinate(0, 0, 0)
    shop = RoomFieldValue(RoomField.MOB_FLAGS, MobFlags.SHOP)

    assert not mapdata.get_room_flag(pos, shop)
    assert mapdata.toggle_room_flag(pos, shop)
    assert mapdata.get_room_flag(pos, shop)
    assert mapdata.get_room_flag(pos, RoomFieldValue(RoomField.MOB_FLAGS, MobFlags.SHOP | MobFlags.RENT))
    assert not mapdata.get_room_flag(Coordinate(5, 5, 5), shop)

    mapdata.toggle_room_flag(pos, shop)
    assert not mapdata.get_room_flag(pos, shop)


def test_toggle_room_flag_overwrites_plain_fields(mapdata):
    mapdata.create_room()
    pos = Coordinate(0, 0, 0)
    lit = RoomFieldValue(RoomField.LIGHT_TYPE, LightType.LIT)

    assert mapdata.toggle_room_flag(pos, lit)
    assert mapdata.toggle_room_flag(pos, lit)

    assert mapdata.get_room_flag(pos, lit)
    assert mapdata.get_room(pos).light is LightType.LIT


@pytest.mark.parametrize("field", [RoomField.NAME, RoomField.DESC])
def test_get_room_flag_rejects_text_fields(mapdata, field):
    mapdata.create_room()

    with pytest.raises(UnhandledFieldError):
        mapdata.get_room_flag(Coordinate(0, 0, 0), RoomFieldValue(field, "x"))


# Exits


def test_get_exit_directions(mapdata, corridor):
    west, middle, east = corridor
    pos = mapdata.room_index().get(middle).position

    assert mapdata.get_exit_directions(pos) == {ExitDirection.EAST, ExitDirection.WEST}
    assert mapdata.get_exit_directions(Coordinate(9, 9, 9)) == frozenset()


def test_door_names(mapdata):
    mapdata.create_room()
    pos = Coordinate(0, 0, 0)

    assert mapdata.get_door_name(Coordinate(9, 9, 9), ExitDirection.NORTH) == DEFAULT_DOOR_NAME
    assert mapdata.get_door_name(pos, ExitDirection.UNKNOWN) == DEFAULT_DOOR_NAME

    assert mapdata.set_door_name(pos, "oak door", ExitDirection.NORTH)
    assert mapdata.get_door_name(pos, ExitDirection.NORTH) == "oak door"
    assert not mapdata.set_door_name(pos, "nowhere", ExitDirection.UNKNOWN)


def test_exit_flags(mapdata):
    mapdata.create_room()
    pos = Coordinate(0, 0, 0)
    hidden = ExitFieldValue(ExitField.DOOR_FLAGS, DoorFlags.HIDDEN)

    assert not mapdata.get_exit_flag(pos, ExitDirection.SOUTH, hidden)
    assert mapdata.toggle_exit_flag(pos, ExitDirection.SOUTH, hidden)
    assert mapdata.get_exit_flag(pos, ExitDirection.SOUTH, hidden)
    assert not mapdata.get_exit_flag(pos, ExitDirection.NORTH, hidden)
    assert not mapdata.toggle_exit_flag(pos, ExitDirection.NONE, hidden)


def test_exit_flag_calls_reject_door_names(mapdata):
    mapdata.create_room()
    name = ExitFieldValue(ExitField.DOOR_NAME, "gate")

    with pytest.raises(ValueError):
        mapdata.get_exit_flag(Coordinate(0, 0, 0), ExitDirection.NORTH, name)
    with pytest.raises(ValueError):
        mapdata.toggle_exit_flag(Coordinate(0, 0, 0), ExitDirection.NORTH, name)


def test_remove_door_names(mapdata):
    mapdata.create_room()
    mapdata.create_room()
    for pos in mapdata.map().coordinates():
        mapdata.set_door_name(pos, "door", ExitDirection.EAST)

    assert mapdata.remove_door_names() == 2

    for pos in mapdata.map().coordinates():
        assert mapdata.get_door_name(pos, ExitDirection.EAST) == ""


# Traversal


def test_get_path_follows_exits(mapdata, corridor):
    start = mapdata.room_index().get(corridor[0]).position

    path = mapdata.get_path(start, [CommandId.EAST, CommandId.LOOK, CommandId.EAST])

    assert path == [Coordinate(1, 0, 0), Coordinate(2, 0, 0)]


def test_get_path_stops_at_ambiguous_exit(mapdata):
    """A second destination on an exit truncates the path without error."""
    a = mapdata.create_room(position=Coordinate(0, 0, 0))
    b = mapdata.create_room(position=Coordinate(0, -1, 0))
    c = mapdata.create_room(position=Coordinate(0, -2, 0))
    d = mapdata.create_room(position=Coordinate(1, -2, 0))
    mapdata.schedule_action(AddExit(a, b, ExitDirection.NORTH))
    mapdata.schedule_action(AddExit(b, c, ExitDirection.NORTH))
    mapdata.schedule_action(AddExit(b, d, ExitDirection.NORTH))
    mapdata.schedule_action(AddExit(c, d, ExitDirection.EAST))

    path = mapdata.get_path(
        Coordinate(0, 0, 0), [CommandId.NORTH, CommandId.NORTH, CommandId.LOOK, CommandId.EAST]
    )

    assert path == [Coordinate(0, -1, 0)]


@pytest.mark.parametrize(
    "commands",
    [
        [CommandId.WEST],
        [CommandId.FLEE, CommandId.EAST],
        [CommandId.UNKNOWN],
    ],
)
def test_get_path_stops_at_first_unusable_command(mapdata, corridor, commands):
    start = mapdata.room_index().get(corridor[0]).position

    assert mapdata.get_path(start, commands) == []


def test_get_path_from_free_cell(mapdata):
    assert mapdata.get_path(Coordinate(4, 4, 4), [CommandId.NORTH]) == []


# Bulk access


def test_draw_reports_lock_state(mapdata, selection, corridor):
    west, middle, east = corridor
    mapdata.get_room_by_id(middle, selection)
    mapdata.create_room(position=Coordinate(10, 0, 0))
    drawer = CollectingDrawer()

    count = mapdata.draw(Coordinate(0, 0, 0), Coordinate(1, 0, 0), drawer)

    assert count == 3
    assert [(room.id, locked) for room, locked in drawer.drawn] == [
        (west, False),
        (middle, True),
        (east, False),
    ]


def test_generic_search_locks_and_delivers_copies(mapdata, corridor):
    west, middle, east = corridor
    recipient = CollectingRecipient()

    delivered = mapdata.generic_search(recipient, lambda room: room.name != "Middle")

    assert delivered == 2
    assert [room.id for room in recipient.received] == [west, east]
    assert mapdata.lock_table().held_by(recipient) == {west, east}

    recipient.received[0].name = "Changed"
    assert mapdata.room_index().get(west).name == "West"


def test_clear_resets_map_but_not_ids(mapdata, selection):
    old = mapdata.create_room(ParseEvent(name="Gone"))
    mapdata.get_room_by_id(old, selection)

    mapdata.clear()

    assert mapdata.room_count() == 0
    assert len(mapdata.map()) == 0
    assert not mapdata.is_locked(old)
    assert mapdata.find_rooms(ParseEvent(name="Gone")) == frozenset()
    assert mapdata.create_room() > old


def test_independent_maps_do_not_share_state():
    settings = RoomGridSettings(max_search_radius=2)
    first, second = MapData(settings), MapData(settings)

    first.create_room()

    assert second.room_count() == 0
    assert second.get_room(Coordinate(0, 0, 0)) is None
    assert RoomSelection() != RoomSelection()
