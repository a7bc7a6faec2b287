"""Integration tests for end-to-end map editing.

These tests drive MapData the way an editor session does: rooms arrive from
the parser, get linked, selected, edited and removed, and every structure has
to agree afterwards.
"""

from roomgrid import (
    AddExit,
    CommandId,
    Coordinate,
    ExitDirection,
    MakePermanent,
    MapData,
    ParseEvent,
    Remove,
    RoomGridSettings,
    RoomSelection,
    SingleRoomAction,
    Update,
)


def explore(mapdata: MapData, names: list[str]) -> list:
    """Walk east, creating and linking one room per name."""
    ids = []
    for x, name in enumerate(names):
        room_id = mapdata.create_room(ParseEvent(name=name), Coordinate(x, 0, 0))
        if ids:
            mapdata.schedule_action(AddExit(ids[-1], room_id, ExitDirection.EAST))
            mapdata.schedule_action(AddExit(room_id, ids[-1], ExitDirection.WEST))
        ids.append(room_id)
    return ids


def test_explore_confirm_and_walk():
    mapdata = MapData(RoomGridSettings(max_search_radius=8))
    ids = explore(mapdata, ["Gate", "Street", "Square", "Temple"])

    for room_id in ids:
        assert mapdata.schedule_action(SingleRoomAction(MakePermanent(), room_id))

    path = mapdata.get_path(Coordinate(0, 0, 0), [CommandId.EAST] * 3 + [CommandId.WEST])

    assert path == [
        Coordinate(1, 0, 0),
        Coordinate(2, 0, 0),
        Coordinate(3, 0, 0),
        Coordinate(2, 0, 0),
    ]
    assert not any(mapdata.get_room(c).temporary for c in path)


def test_delete_selection_then_reuse_the_space():
    """Removing a selected room frees its cell, its exits and its parse entry."""
    mapdata = MapData(RoomGridSettings(max_search_radius=8))
    gate, street, square = explore(mapdata, ["Gate", "Street", "Square"])
    selection = RoomSelection("editor")
    mapdata.get_room_for(Coordinate(1, 0, 0), selection)

    assert mapdata.execute(SingleRoomAction(Remove(), street), selection)

    assert len(selection) == 0
    assert mapdata.get_room(Coordinate(1, 0, 0)) is None
    assert mapdata.get_path(Coordinate(0, 0, 0), [CommandId.EAST]) == []
    assert mapdata.get_exit_directions(Coordinate(2, 0, 0)) == frozenset()

    replacement = mapdata.create_room(ParseEvent(name="Street"), Coordinate(1, 0, 0))
    assert mapdata.get_room(Coordinate(1, 0, 0)).id == replacement
    assert mapdata.find_rooms(ParseEvent(name="Street")) == {replacement}


def test_reparsed_room_moves_between_parse_groups():
    mapdata = MapData(RoomGridSettings(max_search_radius=8))
    a, b = explore(mapdata, ["Road", "Road"])
    road = ParseEvent(name="Road")
    assert mapdata.find_rooms(road) == {a, b}

    selection = RoomSelection()
    mapdata.get_room_by_id(b, selection)
    mapdata.execute(SingleRoomAction(Update(ParseEvent(name="Bridge")), b), selection)

    assert mapdata.find_rooms(road) == {a}
    assert mapdata.find_rooms(ParseEvent(name="Bridge")) == {b}
    assert b in selection
